# src/skyreader/cli.py
import sys
import argparse

# Module imports
from skyreader.config import DEFAULT_SOURCE_NAME
from skyreader.core.report import format_byte_sum
from skyreader.models import ByteSum, FileContent

def create_arg_parser():
    parser = argparse.ArgumentParser(
        description="Reads a text file, sums its bytes, prints its words in reverse order and writes a duplicate."
    )
    parser.add_argument(
        "source",
        type=str,
        nargs="?",
        default=DEFAULT_SOURCE_NAME,
        help=f"Text file to read (default: {DEFAULT_SOURCE_NAME})"
    )
    return parser

def main():
    try:
        parser = create_arg_parser()
        args = parser.parse_args()

        # 1. Load (nothing is printed if this fails)
        try:
            file_content = FileContent.load(args.source)
        except UnicodeDecodeError as e:
            print(f"Error: '{args.source}' is not valid text: {e}", file=sys.stderr)
            sys.exit(1)
        except OSError as e:
            print(f"Error reading '{args.source}': {e}", file=sys.stderr)
            sys.exit(1)

        # 2. Derived values
        byte_sum = ByteSum.from_source(file_content)

        print(f"Content and bytes: {format_byte_sum(byte_sum)}")
        print(f"Reversed content: {file_content.reversed_word_order()}")

        # 3. Duplicate goes last, after both outputs
        try:
            file_content.duplicate()
        except OSError as e:
            print(f"Error writing '{file_content.duplicate_name()}': {e}", file=sys.stderr)
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)

if __name__ == "__main__":
    main()
