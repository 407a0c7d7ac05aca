"""Exception classes for Glow.

Highlighting itself never raises for string input. These exceptions cover
configuration mistakes: bad colorscheme entries and bad matcher patterns.
"""

from __future__ import annotations


class GlowError(Exception):
    """Base exception for all Glow errors.
    
    Subclass this for specific error categories.
    """

    pass


class ColorschemeError(GlowError):
    """Error building a colorscheme.
    
    Raised when a colorscheme names an unknown category or color.
    """

    def __init__(self, key: str, message: str) -> None:
        """Initialize colorscheme error.
        
        Args:
            key: The offending category or color name
            message: Description of the problem
        """
        self.key = key
        super().__init__(f"Colorscheme entry '{key}': {message}")


class PatternError(GlowError):
    """Error in a matcher pattern.
    
    Raised when a pattern fails to compile or can match the empty string,
    which would let the chain claim zero-width spans.
    """

    def __init__(self, category: str, message: str) -> None:
        """Initialize pattern error.
        
        Args:
            category: Category tag the pattern was registered for
            message: Description of the problem
        """
        self.category = category
        super().__init__(f"Pattern for '{category}': {message}")
