from .extension import PayAttentionExtension, init
from .host import ShellHost

__all__ = ["PayAttentionExtension", "ShellHost", "init"]
