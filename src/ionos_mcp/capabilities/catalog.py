from pathlib import Path

import yaml

from .models import CapabilityDescriptor

DEFAULT_MANIFEST_PATH = Path(__file__).parent / "manifest.yaml"


class CapabilityCatalog:
    """Static, ordered list of the tools this server exposes.

    Loaded once from the YAML manifest; nothing is registered afterwards, so
    every call to ``list`` returns the same tuple in the same order.
    """

    def __init__(self, manifest_path: Path = DEFAULT_MANIFEST_PATH) -> None:
        self.manifest_path = manifest_path
        self._descriptors: tuple[CapabilityDescriptor, ...] = ()
        self._by_name: dict[str, CapabilityDescriptor] = {}
        self._load_manifest()

    def _load_manifest(self) -> None:
        with self.manifest_path.open("r", encoding="utf-8") as manifest_file:
            raw = yaml.safe_load(manifest_file) or {}

        descriptors: list[CapabilityDescriptor] = []
        by_name: dict[str, CapabilityDescriptor] = {}
        for entry in raw.get("capabilities", []):
            descriptor = CapabilityDescriptor.model_validate(entry)
            if descriptor.name in by_name:
                raise ValueError(f"duplicate capability name in manifest: {descriptor.name}")
            descriptors.append(descriptor)
            by_name[descriptor.name] = descriptor

        self._descriptors = tuple(descriptors)
        self._by_name = by_name

    def list(self) -> tuple[CapabilityDescriptor, ...]:
        return self._descriptors

    def read(self, name: str) -> CapabilityDescriptor | None:
        return self._by_name.get(name)

    def names(self) -> tuple[str, ...]:
        return tuple(descriptor.name for descriptor in self._descriptors)
