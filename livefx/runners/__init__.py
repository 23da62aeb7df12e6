"""Run loops: the interactive preview and the batch renderer."""
