import argparse
import sys

from wilayah_api import config
from wilayah_api.engine.errors import GenerationError
from wilayah_api.engine.generator import ApiGenerator
from wilayah_api.engine.repository import Repository


def run_generation(data_dir: str, output_dir: str, progress: bool = True) -> int:
    """Clears `output_dir` and regenerates the whole JSON tree from the tables in `data_dir`."""
    repository = Repository(data_dir)
    generator = ApiGenerator(repository, output_dir, progress=progress)

    print("Clearing output directory...")
    generator.clear_output_dir()

    print("Generating API endpoints...")
    count = generator.generate()
    print(f"API generation complete! ({count} artifacts)")
    return count


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate the static JSON tree of administrative divisions.")
    parser.add_argument('--data-dir', default=config.DATA_DIR, help="Directory holding provinces/regencies/districts/villages.csv.")
    parser.add_argument('--output-dir', default=config.OUTPUT_DIR, help="Directory the JSON files are written to.")
    parser.add_argument('--quiet', action='store_true', help="Disable the progress bar.")
    args = parser.parse_args(argv)

    print(f"--> Data: {args.data_dir}\n--> Output: {args.output_dir}")
    try:
        run_generation(args.data_dir, args.output_dir, progress=not args.quiet)
    except GenerationError as e:
        print(f"[ERROR] Error generating API endpoints: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
