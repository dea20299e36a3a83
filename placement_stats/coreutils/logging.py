import logging
import os
from datetime import datetime


def setup_logging(level=logging.INFO, log_dir: str = "logs"):
    """Setup basic logging configuration"""
    os.makedirs(log_dir, exist_ok=True)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        handlers=[
            logging.FileHandler(
                os.path.join(
                    log_dir,
                    f"placement_stats_{datetime.now().strftime('%Y-%m-%d')}.log",
                )
            ),
            logging.StreamHandler(),
        ],
    )
    return logging.getLogger("placement_stats")
