"""
Decomposer Engine
==================

Central orchestrator for the AlgoLex decomposer. The
:class:`DecomposerEngine` wires configuration, the name parser, and the
algorithm decomposer together and returns :class:`DecompositionReport`
objects for the CLI and report layers.

Architecture follows the Facade pattern (Gamma et al., 1994).

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
      Addison-Wesley.
"""

from __future__ import annotations

import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Optional

from shared.config import LexConfig
from shared.logger import LexLogger

from decomposer.core.decomposer import AlgorithmDecomposer
from decomposer.core.models import Decomposition, DecompositionReport
from decomposer.parsers.name_parser import NameParser


class DecomposerEngine:
    """Orchestrates algorithm name decomposition.

    Usage::

        engine = DecomposerEngine()
        report = engine.decompose_names(["SHA256withRSA", "AES/GCM/NoPadding"])
        report = engine.decompose_file(Path("java.security"))

    Attributes:
        config: AlgoLex configuration instance.
        logger: Logger for the decomposer engine.
    """

    def __init__(self, config: Optional[LexConfig] = None) -> None:
        self.config = config or LexConfig()
        settings = self.config.global_settings
        self.logger = LexLogger(
            "decomposer.engine",
            log_level="DEBUG" if settings.debug else settings.log_level,
            log_file=settings.log_file or None,
            json_logs=settings.log_json,
        )

        self._decomposer = AlgorithmDecomposer(
            extra_digest_pairs=self.config.decomposer.digest_pairs(),
        )
        self._parser = NameParser(
            comment_prefix=self.config.decomposer.comment_prefix,
        )

    @property
    def decomposer(self) -> AlgorithmDecomposer:
        return self._decomposer

    # ------------------------------------------------------------------ #
    #  Single name
    # ------------------------------------------------------------------ #

    def describe(self, algorithm: Optional[str]) -> Decomposition:
        """Decompose one algorithm name into a :class:`Decomposition`."""
        tokens = self._decomposer.decompose(algorithm)
        plain = {
            token
            for segment in self._decomposer.segments(algorithm)
            for token in self._decomposer.split_components(segment)
        }
        aliases = self._decomposer.digest_aliases(plain)

        self.logger.debug(
            "Decomposed %r into %d tokens", algorithm, len(tokens)
        )
        return Decomposition(
            algorithm=algorithm or "",
            segments=self._decomposer.segments(algorithm),
            tokens=sorted(tokens),
            digest_aliases=sorted(aliases),
        )

    # ------------------------------------------------------------------ #
    #  Batches
    # ------------------------------------------------------------------ #

    def decompose_names(
        self,
        names: Iterable[Optional[str]],
        source: str = "arguments",
    ) -> DecompositionReport:
        """Decompose a batch of algorithm names.

        Args:
            names: Algorithm names, in the order they should be reported.
            source: Label describing where the names came from.

        Returns:
            DecompositionReport with one result per (distinct) name.
        """
        start_time = time.monotonic()
        report = DecompositionReport(
            source=source,
            started_at=datetime.now(timezone.utc),
        )

        seen: set[str] = set()
        with self.logger.operation("decompose_names"):
            for name in names:
                key = name or ""
                if self.config.decomposer.deduplicate_names:
                    if key in seen:
                        continue
                    seen.add(key)
                report.results.append(self.describe(name))

            report.duration = time.monotonic() - start_time
            self.logger.info(
                "Decomposed %d names from %s into %d distinct tokens",
                report.total_names,
                source,
                len(report.all_tokens),
                names=report.total_names,
                tokens=len(report.all_tokens),
            )

        return report

    def decompose_text(self, text: str) -> DecompositionReport:
        """Extract algorithm names from *text* and decompose them."""
        names = self._parser.parse_string(text)
        return self.decompose_names(names, source="text")

    def decompose_file(self, file_path: Path) -> DecompositionReport:
        """Extract algorithm names from a file and decompose them.

        Raises:
            FileNotFoundError: If the file does not exist.
            PermissionError: If the file cannot be read.
        """
        with self.logger.operation("decompose_file"):
            try:
                names = self._parser.parse_file(file_path)
            except (FileNotFoundError, PermissionError) as exc:
                self.logger.error("Cannot read %s: %s", file_path, exc)
                raise
            self.logger.debug("Found %d names in %s", len(names), file_path)

        return self.decompose_names(names, source=str(file_path))
