"""Package entry point for ``python -m kupu_transcript``.

WHY: Users run the review tool as ``python -m kupu_transcript subs.vtt``.
Python's ``-m`` flag looks for ``__main__.py`` inside the package and
executes it.

HOW: Delegates to the CLI's main() function.
"""

from kupu_transcript.cli import main

if __name__ == "__main__":
    main()
