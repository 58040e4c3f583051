import os
import logging
from datetime import datetime

from hourcalc.config import get_data_dir


def setup_logger(name, testing=False):
    """Setup logger that can be toggled for testing"""
    logger = logging.getLogger(name)

    # Silent unless testing mode attaches the file log
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())

    if testing:
        # Common log file for all components
        data_dir = get_data_dir()
        os.makedirs(data_dir, exist_ok=True)
        log_file = os.path.abspath(os.path.join(data_dir, 'hourcalc.log'))

        if not any(isinstance(h, logging.FileHandler) and h.baseFilename == log_file
                   for h in logging.root.handlers):
            handler = logging.FileHandler(log_file)
            formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            handler.setFormatter(formatter)

            logging.root.addHandler(handler)
            logging.root.setLevel(logging.DEBUG)

            logging.info('=' * 50)
            logging.info(f'Logging started at {datetime.now()}')
            logging.info('=' * 50)

    return logger
