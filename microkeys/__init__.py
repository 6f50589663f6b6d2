"""Key events, key-binding trees and command-bar completion."""

__version__ = "0.1.0"
__all__ = ["completion", "events", "keytree"]