#!/usr/bin/env python3
import argparse
import os
import sys
from kube_mirror.repositories import ConfigRepository, ReportRepository
from kube_mirror.services.image_sync_service import ImageSyncService
from kube_mirror.utils.logging import setup_logger

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Mirror the images of a kubernetes release to a personal registry")
    parser.add_argument("version", help="Kubernetes version, e.g. 1.25.1 or v1.25.1")
    parser.add_argument("--dry-run", action="store_true", help="Resolve and probe images without pulling or pushing")
    parser.add_argument("--config", help="Path of the mirror config file")
    parser.add_argument("--report", help="Write the run report to this YAML file")
    args = parser.parse_args(argv)

    logger = setup_logger("ImageMirror")

    try:
        config_file = args.config or os.environ.get("MIRROR_CONFIG_FILE", f"{ROOT_DIR}/mirror.yaml")
        logger.info(f"Starting image mirror for kubernetes {args.version} with config file: {config_file}")
        config = ConfigRepository(config_file).load()
        report = ImageSyncService(args.version, config, dry_run=args.dry_run).run()
        if args.report:
            ReportRepository(args.report).save(report)
            logger.info(f"Report written to {args.report}")
        if report.failed and config.fail_on_component_error:
            logger.error(f"Image mirror run finished with failed components: {', '.join(report.failed)}")
            return 1
        logger.info("Image mirror run completed")
        return 0
    except Exception as e:
        logger.error(f"Image mirror run failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
