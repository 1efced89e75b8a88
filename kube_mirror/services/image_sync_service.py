import logging
from typing import override

from kube_mirror.clients.command_client import CommandClient
from kube_mirror.clients.container_engine_client import ContainerEngineClient
from kube_mirror.clients.kubeadm_client import KubeadmClient
from kube_mirror.clients.remote_text_client import RemoteTextClient
from kube_mirror.models import ImageReference, MirrorConfig, ProbeResult, ProbeStatus, SyncReport, TargetVersion
from kube_mirror.services.existence_prober import ExistenceProber
from kube_mirror.services.image_locator import locate
from kube_mirror.services.image_tag_resolver import ConstantsFileStrategy, ImageTagResolver, KubeadmStrategy
from kube_mirror.services.mirror_synchronizer import MirrorSynchronizer
from kube_mirror.services.service import Service
from kube_mirror.utils.logging import setup_logger


class ImageSyncService(Service):
    def __init__(self, kube_version: str, config: MirrorConfig, dry_run: bool = False):
        self.kube_version: str = kube_version
        self.config: MirrorConfig = config
        self.dry_run: bool = dry_run
        self.logger: logging.Logger = setup_logger("ImageSyncService")

        command = CommandClient(timeout=config.command_timeout)
        self.engine: ContainerEngineClient = ContainerEngineClient(
            command, engine=config.container_engine, check_image=config.engine_check_image
        )
        fetcher = RemoteTextClient(
            timeout=config.fetch_timeout, retries=config.fetch_retries, retry_delay=config.fetch_retry_delay
        )
        self.resolver: ImageTagResolver = ImageTagResolver([
            KubeadmStrategy(KubeadmClient(command)),
            ConstantsFileStrategy(fetcher, config.constants_url_template),
        ])
        self.prober: ExistenceProber = ExistenceProber(self.engine)
        self.synchronizer: MirrorSynchronizer = MirrorSynchronizer(
            self.engine, stop_on_first_failure=config.stop_on_first_failure
        )

    @override
    def run(self) -> SyncReport:
        version = TargetVersion.parse(self.kube_version)
        self.logger.info(f"Mirroring images of kubernetes {version} to {self.config.mirror_registry}")
        self.engine.ensure_available()

        resolution = self.resolver.resolve(version)
        mirror_refs, source_refs = locate(resolution.tags, self.config.mirror_registry, self.config.source_registry)
        existence = self.prober.probe(mirror_refs)

        if self.dry_run:
            self.log_planned(existence, source_refs, mirror_refs)
            results = {}
        else:
            results = self.synchronizer.sync(existence, source_refs, mirror_refs)

        report = SyncReport(
            version=str(version),
            strategy=resolution.strategy,
            tags=resolution.tags,
            present=[name for name, probe in existence.items() if probe.exists],
            results=list(results.values()),
            probe_failures={
                name: probe.detail for name, probe in existence.items() if probe.status == ProbeStatus.FAILED
            },
            dry_run=self.dry_run,
        )
        self.log_summary(report)
        return report

    def log_planned(self, existence: dict[str, ProbeResult], source_refs: dict[str, ImageReference], mirror_refs: dict[str, ImageReference]) -> None:
        for name, probe in existence.items():
            if probe.exists:
                continue
            self.logger.info(f"Dry run mode. {source_refs[name]} would be pushed as {mirror_refs[name]}")

    def log_summary(self, report: SyncReport) -> None:
        self.logger.info(
            f"Kubernetes {report.version} resolved via {report.strategy}: "
            f"{len(report.present)} already mirrored, {len(report.synced)} synced, {len(report.failed)} failed"
        )
        if report.probe_failures:
            self.logger.warning(f"Mirror probe failed for: {', '.join(sorted(report.probe_failures))}")
        for result in report.results:
            if not result.succeeded:
                self.logger.warning(f"{result.component} ({result.mirror}) failed at: {', '.join(result.failed_steps)}")
