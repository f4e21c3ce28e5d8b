# textcrypt/report.py
"""
Report builder for comparing the algorithms side by side.

Usage:
    report = ReportBuilder()
    rows = report.sample_rows("Hello!", {AlgorithmTag.AES128: "thisisasecretkey"})
    report.comparison_table(rows)
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from rich.console import Console
from rich.table import Table

from textcrypt.EncryptionAlgorithm import AlgorithmTag
from textcrypt.TextCipher import KeyMaterial, TextCipher
from textcrypt.algorithms import ALGORITHM_CLASSES
from textcrypt.errors import CipherError

COLUMNS = ["algorithm", "ciphertext", "round_trip", "elapsed_ms"]

_THEMES: Dict[str, Dict[str, str]] = {
    "default": {"header": "bold cyan", "ok": "green", "fail": "bold red", "skip": "yellow"},
    "minimal": {"header": "bold", "ok": "", "fail": "bold", "skip": "dim"},
}


class ReportBuilder:
    """
    Styled report builder rendering with rich.

    Args:
        console: Console to print to (defaults to a new stdout Console)
        theme: Color theme - "default" or "minimal"
        max_width: Ciphertext longer than this is shortened in tables
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        theme: str = "default",
        max_width: int = 48,
    ) -> None:
        self._console = console or Console()
        self._colors = _THEMES.get(theme, _THEMES["default"])
        self.max_width = max_width

    def sample_rows(
        self,
        text: str,
        keys: Optional[Mapping[AlgorithmTag, KeyMaterial]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Encrypt ``text`` with every algorithm and check the round trip.

        Algorithms that need a key and have none in ``keys`` are reported as
        skipped. Base64 and ROT13 need no key; Caesar falls back to its
        default shift.
        """
        keys = keys or {}
        rows: List[Dict[str, Any]] = []
        for tag in AlgorithmTag:
            row: Dict[str, Any] = {"algorithm": tag.value, "ciphertext": "", "elapsed_ms": None}
            algo_class = ALGORITHM_CLASSES[tag]
            if algo_class.requires_key and not algo_class.key_optional and tag not in keys:
                row["round_trip"] = "skipped"
                rows.append(row)
                continue

            try:
                cipher = TextCipher(tag, keys.get(tag, ""))
            except CipherError as e:
                row["round_trip"] = e.kind
                rows.append(row)
                continue

            enc = cipher.try_encrypt(text)
            dec = cipher.try_decrypt(enc.output)
            row["ciphertext"] = enc.output
            row["elapsed_ms"] = round(
                enc.metrics.get("elapsed_ms", 0) + dec.metrics.get("elapsed_ms", 0), 3
            )
            if not dec.success:
                row["round_trip"] = dec.error_kind
            elif dec.output == text:
                row["round_trip"] = "ok"
            else:
                row["round_trip"] = "mismatch"
            rows.append(row)
        return rows

    def comparison_table(
        self,
        rows: List[Dict[str, Any]],
        title: str = "Algorithm Comparison",
    ) -> Table:
        """Render rows from ``sample_rows`` and return the rich Table."""
        table = Table(title=title, header_style=self._colors["header"])
        for col in COLUMNS:
            table.add_column(col, justify="right" if col == "elapsed_ms" else "left")

        for row in rows:
            status = row.get("round_trip", "")
            if status == "ok":
                style = self._colors["ok"]
            elif status == "skipped":
                style = self._colors["skip"]
            else:
                style = self._colors["fail"]
            elapsed = row.get("elapsed_ms")
            table.add_row(
                row["algorithm"],
                self._shorten(row.get("ciphertext", "")),
                f"[{style}]{status}[/]" if style else status,
                "-" if elapsed is None else f"{elapsed:.3f}",
            )

        self._console.print(table)
        return table

    def _shorten(self, value: str) -> str:
        if len(value) <= self.max_width:
            return value
        return value[: self.max_width - 3] + "..."


def quick_test(
    cipher: TextCipher,
    test_data: str = "Hello, textcrypt!",
    console: Optional[Console] = None,
) -> bool:
    """
    Quick round-trip check for one TextCipher.

    Prints each step and returns whether the round trip succeeded.
    """
    out = console or Console()
    out.print(f"Testing: {cipher.algorithm.value}")
    out.print(f"Input: {test_data!r}", markup=False)
    out.rule()

    enc = cipher.try_encrypt(test_data)
    out.print(f"Encrypt: {enc!r}", markup=False)
    if not enc.success:
        out.print(f"  ERROR: {enc.error}", markup=False)
        return False

    dec = cipher.try_decrypt(enc.output)
    out.print(f"Decrypt: {dec!r}", markup=False)
    if not dec.success:
        out.print(f"  ERROR: {dec.error}", markup=False)
        return False

    if dec.output == test_data:
        out.print("Round-trip successful!")
        return True

    out.print("Round-trip FAILED!")
    out.print(f"  Expected: {test_data!r}", markup=False)
    out.print(f"  Got: {dec.output!r}", markup=False)
    return False
