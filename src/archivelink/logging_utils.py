import logging


def setup_logging(level=logging.INFO):
    """Configure root logging once; later calls only adjust the level."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format="[%(asctime)s] %(levelname)s %(name)s - %(message)s")
    logging.getLogger("archivelink").setLevel(level)
