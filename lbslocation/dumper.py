"""Diagnostic dump text for the location services."""

import logging

logger = logging.getLogger(__name__)

ARGS_HELP = "-h"


def _log_args(args):
    joined = "".join(f"{each}|" for each in args)
    logger.info("Dumper[%d] args: %s", len(args), joined)


def _dump(title, basic_dump, args):
    args = list(args)
    _log_args(args)
    if args and args[0] == ARGS_HELP:
        return (
            f"{title} dump options:\n"
            "  [-h]\n"
            "  description of the cmd option:\n"
            "    -h: show help.\n"
        )
    return basic_dump()


def geocode_dump(basic_dump, args):
    """Help text for "-h", otherwise the text basic_dump returns."""
    return _dump("Geocode", basic_dump, args)


def gnss_dump(basic_dump, args):
    """Help text for "-h", otherwise the text basic_dump returns."""
    return _dump("Gnss", basic_dump, args)


def locator_dump(basic_dump, args):
    """Help text for "-h", otherwise the text basic_dump returns."""
    return _dump("Locator", basic_dump, args)


def network_dump(basic_dump, args):
    """Help text for "-h", otherwise the text basic_dump returns."""
    return _dump("Network", basic_dump, args)


def passive_dump(basic_dump, args):
    """Help text for "-h", otherwise the text basic_dump returns."""
    return _dump("Passive", basic_dump, args)