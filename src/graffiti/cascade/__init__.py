"""Style cascade over a document and a list of stylesheets."""

from graffiti.cascade.resolver import StyleResolver

__all__ = ["StyleResolver"]
