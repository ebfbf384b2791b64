"""caseconv command line: convert, styles, demo."""
