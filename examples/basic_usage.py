#!/usr/bin/env python3
"""Basic usage example"""

from leveled_logger import Logger, LoggerBuilder, get_default_registry

def main():
    registry = get_default_registry()
    registry.threshold = "parser"

    # Direct construction: title and a 2-space indent
    log = Logger("Parser", 2)
    log.info("Parsing started")
    log.parser("token accepted", 2)
    log.debug("not shown at parser level")
    log.warning("ambiguous form")
    log.error("unexpected end of input")

    # Builder pattern
    morph = (LoggerBuilder()
        .with_title("Morph")
        .with_indent(4)
        .with_default("morph")
        .build())
    morph.log("hidden until the threshold reaches morph")
    morph.bare("bare output is printed but never stored", 2)

    print(f"errors: {registry.count_errors()}, warnings: {registry.count_warnings()}")
    print(f"lines matching 'token': {registry.messages_that_match(r'token')}")

    # Disable everything
    registry.threshold = None
    log.error("silenced")

if __name__ == "__main__":
    main()
