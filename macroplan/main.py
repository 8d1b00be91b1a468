import logging

import uvicorn
from macroplan.api.api_run import app
from macroplan.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL
from macroplan.utilities.network import planner_urls


def main():
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    local_url, *lan_urls = planner_urls(APP_PORT)
    print(f"MacroPlan running on {local_url} (Press CTRL+C to quit)")
    for url in lan_urls:
        print(f"Open the planner from other devices at: {url}")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
