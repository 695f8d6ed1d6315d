import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once, before the app starts serving."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # uvicorn's access log duplicates the request line logged by main.py
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
