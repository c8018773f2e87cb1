"""bemlint: namespaced BEM class-name linter."""

__version__ = "0.3.0"
