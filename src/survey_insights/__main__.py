"""Package entry point.

Preferred invocation is via the installed console script:

    survey-insights ...

For convenience we also support:

    python -m survey_insights ...
"""

from __future__ import annotations

from .cli import app


def main() -> None:
    """Entry point used by `python -m survey_insights`."""

    app()


if __name__ == "__main__":
    main()
