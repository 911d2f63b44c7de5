import logging

LOGGER_NAME = "CipherKit"

logger = logging.getLogger(LOGGER_NAME)


def setup_logging(level=logging.INFO):
    # attach a console handler once, same format as the benchmark core
    logger.setLevel(level)

    if not logger.handlers:
        ch = logging.StreamHandler()
        ch.setLevel(level)
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        ch.setFormatter(formatter)
        logger.addHandler(ch)
    else:
        for handler in logger.handlers:
            handler.setLevel(level)

    return logger
