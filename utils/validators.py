from typing import Optional


class TextValidator:
    """Basic checks for the free-text fields of a book."""

    @staticmethod
    def _is_non_empty_alpha(text: Optional[str]) -> bool:
        if text is None:
            return False
        t = text.strip()
        if not t:
            return False
        # allow spaces, digits and punctuation as long as there is a letter
        return any(c.isalpha() for c in t)

    @staticmethod
    def validate_title(title: Optional[str]) -> bool:
        return TextValidator._is_non_empty_alpha(title)

    @staticmethod
    def validate_author(author: Optional[str]) -> bool:
        # must not be digits only
        if author is None:
            return False
        t = author.strip()
        if not t:
            return False
        return not t.isdigit()

    @staticmethod
    def validate_name(name: Optional[str]) -> bool:
        return name is not None and bool(name.strip())


class NumberValidator:
    """Range checks for edition data and fine inputs."""

    @staticmethod
    def is_positive(value) -> bool:
        # bool is an int subclass; True is not a page count
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        return value > 0

    @staticmethod
    def is_positive_int(value) -> bool:
        return isinstance(value, int) and NumberValidator.is_positive(value)

    @staticmethod
    def is_non_negative_int(value) -> bool:
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return value >= 0
