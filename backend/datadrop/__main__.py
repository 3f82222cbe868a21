"""Run the server: ``python -m datadrop``."""
import uvicorn

from datadrop.config import get_config
from datadrop.main import create_app


def main() -> None:
    config = get_config()
    uvicorn.run(create_app(config), host=config.server.host, port=config.server.port)


if __name__ == "__main__":
    main()
