"""
Parse a LinkedIn profile PDF and print the result as JSON
"""
import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from profile_parser.core.exceptions import ProfileParserException
from profile_parser.core.logging_config import configure_logging
from profile_parser.profiles.parser import ProfileParser
from profile_parser.profiles.sections import Section


def main(argv=None) -> int:
    arg_parser = argparse.ArgumentParser(description=__doc__.strip())
    arg_parser.add_argument("pdf", help="Path to the exported profile PDF")
    arg_parser.add_argument(
        "--section",
        action="append",
        default=[],
        metavar="NAME",
        help=f"Only parse this section (repeatable). One of: {', '.join(s.value for s in Section)}",
    )
    arg_parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    args = arg_parser.parse_args(argv)

    configure_logging(level=args.log_level, stream=sys.stderr)

    try:
        profile = ProfileParser().parse_file(args.pdf, args.section)
    except ProfileParserException as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    print(profile.model_dump_json(indent=2, exclude_none=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
