"""Runtime layer: streaming session and REST request execution."""
