from .posts import PostIn, PostPatch, PostOut, MessageOut  # noqa: F401
