r"""Per-service resource clients built on the retry executor."""
