# output_manager.py

import sys


class OutputManager:
    """
    Handles all report printing.

    Usage:
        om = OutputManager()
        om.write("Hello")   # prints and buffers
        om.getvalue()       # "Hello\\n" (with color codes)
        om.close()
    """

    def __init__(self, quiet: bool = False):
        """
        Parameters:
            quiet: if True, nothing reaches the screen; text is only buffered
        """
        self.quiet = quiet
        self._buffer: list[str] = []

    def write(self, *args, sep: str = " ", end: str = "\n") -> None:
        """Write to screen and buffer."""
        text = sep.join(str(a) for a in args) + end
        self._buffer.append(text)

        if not self.quiet:
            print(text, end="")

    def getvalue(self) -> str:
        """Returns everything written (with color codes)."""
        return "".join(self._buffer)

    def close(self) -> None:
        """Flush the screen stream."""
        if not self.quiet:
            sys.stdout.flush()
