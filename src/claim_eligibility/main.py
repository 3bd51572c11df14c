"""HTTP server entry point: ``claim-eligibility-server [overrides...]``.

The working directory is left alone (``hydra.job.chdir: false``), so a
relative ``data.sample_policy`` resolves against the directory the server was
started from.
"""

from __future__ import annotations

import hydra
import uvicorn
from loguru import logger
from omegaconf import DictConfig

from claim_eligibility.api.app import create_app


@hydra.main(version_base=None, config_path="conf", config_name="config")
def main(cfg: DictConfig) -> None:
    server = cfg.server
    logger.info("Serving claim eligibility on {host}:{port}", host=server.host, port=server.port)
    uvicorn.run(
        create_app(cfg),
        host=server.host,
        port=server.port,
        log_level="debug" if server.debug else "info",
    )


if __name__ == "__main__":
    main()
