r"""Data models returned and accepted by the resource clients."""
