"""A small menu-driven line editor: a numbered-line document and an interactive front end."""

__version__ = "0.1.0"
__all__ = ["document", "editor"]