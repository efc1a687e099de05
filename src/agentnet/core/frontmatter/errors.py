"""Error types for front-matter extraction."""


class FrontMatterError(ValueError):
    """The document does not carry a well-formed front-matter header."""

    def __init__(self, condition: str) -> None:
        self.condition = condition
        super().__init__("Missing front matter delimiters (---)")
