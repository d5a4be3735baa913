"""Site configuration, content store and sidebar navigation checks for Shelton's Bash Guide."""

__version__ = "0.1.0"
