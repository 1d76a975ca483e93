class Tag:
    __slots__ = ("name", "opening", "position", "property", "source_position", "valid")

    def __init__(self, name="", opening=True, position=0, source_position=None):
        self.name = name
        self.property = ""
        self.opening = bool(opening)
        self.valid = True
        self.position = position
        self.source_position = source_position

    def __repr__(self):
        slash = "" if self.opening else "/"
        prop = f"={self.property!r}" if self.property else ""
        invalid = " invalid" if not self.valid else ""
        return f"<Tag [{slash}{self.name}{prop}] at {self.position}{invalid}>"


class ParseError:
    """Represents a markup error with the input offset of its bracket."""

    __slots__ = ("code", "message", "position")

    def __init__(self, code, position=None, message=None):
        self.code = code
        self.position = position
        self.message = message or code

    def __repr__(self):
        if self.position is not None:
            return f"ParseError({self.code!r}, position={self.position})"
        return f"ParseError({self.code!r})"

    def __str__(self):
        if self.position is not None:
            if self.message != self.code:
                return f"({self.position}): {self.code} - {self.message}"
            return f"({self.position}): {self.code}"
        if self.message != self.code:
            return f"{self.code} - {self.message}"
        return self.code

    def __eq__(self, other):
        if not isinstance(other, ParseError):
            return NotImplemented
        return self.code == other.code and self.position == other.position

    __hash__ = None  # Unhashable since we define __eq__


class StrictModeError(SyntaxError):
    """Raised on the first markup error when rendering in strict mode."""

    def __init__(self, error):
        self.error = error
        super().__init__(str(error))
