"""Top-level application orchestrator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from core.lister import WindowLister
from core.logging_config import configure_logging
from core.policy_runtime import AppConfig, load_effective_config
from core.raiser import WindowRaiser
from core.resolver import TargetApplicationResolver
from os_controller.backend_factory import build_backend
from os_controller.base_controller import WorkspaceBackend


@dataclass
class RuntimeBundle:
    """Holds initialized runtime components."""

    config: AppConfig
    backend: WorkspaceBackend
    resolver: TargetApplicationResolver
    lister: WindowLister
    raiser: WindowRaiser


class Orchestrator:
    """Creates and wires runtime components for CLI use."""

    def __init__(self, root: Path | None = None, backend: WorkspaceBackend | None = None) -> None:
        default_root = Path(__file__).resolve().parents[1]
        self.root = (root or default_root).resolve()
        self.backend = backend

    def build(self) -> RuntimeBundle:
        config = load_effective_config(self.root)
        configure_logging(config.logging.level)

        backend = self.backend or build_backend(config.backend)
        resolver = TargetApplicationResolver(backend, launcher_bundle_id=config.launcher.bundle_id)
        return RuntimeBundle(
            config=config,
            backend=backend,
            resolver=resolver,
            lister=WindowLister(backend, resolver, config=config.lister),
            raiser=WindowRaiser(backend, config=config.raiser),
        )
