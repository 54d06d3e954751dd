import logging
from pathlib import Path


def setup_logging(level: int = logging.INFO, log_dir: Path = Path("logs")) -> None:
    """Log to logs/flood_alert.log and the console"""
    log_dir.mkdir(exist_ok=True)
    log_file = log_dir / "flood_alert.log"

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler(),
        ],
    )
