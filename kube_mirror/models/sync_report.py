from pydantic.dataclasses import dataclass

from .sync_result import ComponentSyncResult


@dataclass(frozen=True)
class SyncReport:
    version: str
    strategy: str
    tags: dict[str, str]
    present: list[str]
    results: list[ComponentSyncResult]
    probe_failures: dict[str, str] | None = None
    dry_run: bool = False

    @property
    def synced(self) -> list[str]:
        return [r.component for r in self.results if r.succeeded]

    @property
    def failed(self) -> list[str]:
        return [r.component for r in self.results if not r.succeeded]

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "strategy": self.strategy,
            "dry_run": self.dry_run,
            "tags": dict(sorted(self.tags.items())),
            "present": sorted(self.present),
            "probe_failures": dict(self.probe_failures or {}),
            "synced": self.synced,
            "failed": self.failed,
            "results": [
                {
                    "component": r.component,
                    "source": str(r.source),
                    "mirror": str(r.mirror),
                    "steps": [
                        {"step": s.step, "succeeded": s.succeeded, "skipped": s.skipped}
                        for s in r.steps
                    ],
                }
                for r in self.results
            ],
        }
