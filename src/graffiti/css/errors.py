"""Parser error types."""


class ParseError(Exception):
    """Raised when a token slice cannot be read as the expected CSS value.

    Value parsers raise it; the property resolver and the stylesheet parser
    catch it and drop the offending declaration or block.
    """

    def __init__(self, message: str, position: int | None = None):
        self.position = position
        super().__init__(message)
