"""Main entry point for symdelete package."""

from loguru import logger

from symdelete.cli import create_parser
from symdelete.core import load_config
from symdelete.processing import run_pipeline
from symdelete.utils.logging import add_log_file_handler, setup_logger


def main():
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    try:
        config = load_config(args.config, args, parser)
    except ValueError as e:
        parser.error(str(e))

    setup_logger(verbose=config.verbose, debug=config.debug)
    if config.log_file:
        add_log_file_handler(config.log_file, verbose=config.verbose, debug=config.debug)

    if config.verbose:
        logger.info("=" * 60)
        logger.info("symdelete - Symmetric Delete Spelling Correction")
        logger.info("=" * 60)
        logger.info("")
        logger.info("Configuration:")
        logger.info(f"  Max edit distance: {config.max_edit_distance}")
        logger.info(f"  Mode: {config.mode.value}")
        logger.info(f"  Language: {config.language}")
        if config.corpus:
            logger.info(f"  Corpus: {config.corpus}")
        if config.word_list:
            logger.info(f"  Word list: {config.word_list}")
        if config.frequency_dictionary:
            logger.info(f"  Frequency dictionary: {config.frequency_dictionary}")
        if config.top_n:
            logger.info(f"  Top N words: {config.top_n}")
        logger.info("")

    try:
        run_pipeline(config)
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Processing interrupted by user")
        raise
    except Exception:
        if config.verbose:
            logger.error("")
            logger.error("=" * 60)
            logger.error("✗ Processing failed")
            logger.error("=" * 60)
        raise


if __name__ == "__main__":
    main()
