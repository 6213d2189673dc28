"""Command that prints a sample of the helper functions at work."""

from __future__ import annotations

import argparse

from phpfuncs.arrays import array, array_reverse
from phpfuncs.files import basename, sys_get_temp_dir
from phpfuncs.output import echo, print_
from phpfuncs.strings import (
    addcslashes,
    addslashes,
    chr_,
    htmlspecialchars,
    mb_strlen,
    ord_,
    strrev,
)
from phpfuncs.variables import intval, is_numeric, strval

__all__ = ["main"]


def main(argv=None) -> int:
    """Print the sample and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="phpfuncs",
        description="Print a sample of the helper functions at work.",
    )
    parser.parse_args(argv)

    echo("Hello ", "world!\n")
    print_("This is a string.\n")

    lines = [
        chr_(65),
        ord_("A"),
        array(1, ord_("a"), "ABC"),
        strrev("Hello world!"),
        strrev("你好，世界"),
        array_reverse(array(1, ord_("a"), "ABC")),
        sys_get_temp_dir(),
        is_numeric("-123.45"),
        basename("foo/bar.ext"),
        addcslashes("abc/cde.ext", "c"),
        addslashes("abc/'\"c\\de.ext"),
        htmlspecialchars("This is some <b>bold</b> text."),
        mb_strlen("你好，世界"),
        intval("-123abc"),
    ]
    for value in lines:
        print(strval(value))
    return 0