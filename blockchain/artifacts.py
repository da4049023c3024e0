"""
Artifact Loader
Resolves contract names to compiled Hardhat artifacts (ABI + bytecode)
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Union
from loguru import logger

from .exceptions import ArtifactNotFoundError


@dataclass(frozen=True)
class ContractArtifact:
    """Compiled contract as written by `npx hardhat compile`"""

    contract_name: str
    source_name: str
    abi: List[Dict]
    bytecode: str

    @property
    def fully_qualified_name(self) -> str:
        return f"{self.source_name}:{self.contract_name}"

    @property
    def is_deployable(self) -> bool:
        """Abstract contracts and interfaces compile to empty bytecode"""
        return self.bytecode not in ("", "0x")

    @property
    def constructor_inputs(self) -> List[Dict]:
        for entry in self.abi:
            if entry.get('type') == 'constructor':
                return entry.get('inputs', [])
        return []


class ArtifactLoader:
    """
    Looks up artifacts the way Hardhat does

    Bare names ("YieldManager") are searched for under the artifacts
    directory; fully qualified names ("contracts/YieldManager.sol:YieldManager")
    map straight to a file.
    """

    def __init__(self, artifacts_path: Union[str, Path] = "artifacts"):
        """
        Initialize Artifact Loader

        Args:
            artifacts_path: Hardhat artifacts directory
        """
        self.artifacts_path = Path(artifacts_path)

    def load(self, name: str) -> ContractArtifact:
        """
        Load artifact for a contract

        Args:
            name: Bare or fully qualified contract name

        Returns:
            ContractArtifact
        """
        if ':' in name:
            path = self._fully_qualified_path(name)
        else:
            path = self._find_by_name(name)

        logger.debug(f"Loading artifact {path}")

        with open(path, 'r') as f:
            contract_json = json.load(f)

        return ContractArtifact(
            contract_name=contract_json.get('contractName', path.stem),
            source_name=contract_json.get(
                'sourceName', path.parent.relative_to(self.artifacts_path).as_posix()
            ),
            abi=contract_json['abi'],
            bytecode=contract_json.get('bytecode', ''),
        )

    def _fully_qualified_path(self, name: str) -> Path:
        source_name, contract_name = name.rsplit(':', 1)
        path = self.artifacts_path / source_name / f"{contract_name}.json"

        if not path.is_file():
            raise ArtifactNotFoundError(
                f"Artifact for contract \"{name}\" not found at {path}. "
                f"Run 'npx hardhat compile' first"
            )

        return path

    def _find_by_name(self, name: str) -> Path:
        if not self.artifacts_path.is_dir():
            raise ArtifactNotFoundError(
                f"Artifacts directory {self.artifacts_path} does not exist. "
                f"Run 'npx hardhat compile' first"
            )

        matches = sorted(
            path for path in self.artifacts_path.rglob(f"{name}.json")
            if 'build-info' not in path.relative_to(self.artifacts_path).parts
        )

        if not matches:
            raise ArtifactNotFoundError(
                f"Artifact for contract \"{name}\" not found in {self.artifacts_path}"
            )

        if len(matches) > 1:
            candidates = ', '.join(
                f"{path.parent.relative_to(self.artifacts_path).as_posix()}:{name}"
                for path in matches
            )
            raise ArtifactNotFoundError(
                f"There are multiple artifacts for contract \"{name}\", "
                f"please use a fully qualified name instead: {candidates}"
            )

        return matches[0]
