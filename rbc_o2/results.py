"""Dissociation curve result structures and export."""

from dataclasses import dataclass
import csv
import json
import logging
from pathlib import Path
from typing import Any, Sequence

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DissociationCurve:
    label: str
    po2_mmhg: np.ndarray
    saturation: np.ndarray
    p50_mmhg: float
    metadata: dict[str, Any]


def _as_curves(curves: DissociationCurve | Sequence[DissociationCurve]) -> list[DissociationCurve]:
    if isinstance(curves, DissociationCurve):
        return [curves]
    curves = list(curves)
    if not curves:
        raise ValueError("at least one curve is required for export")
    return curves


def _format_number(value: float, decimal: str) -> str:
    text = f"{float(value):.12g}"
    if decimal != ".":
        text = text.replace(".", decimal)
    return text


def export_curve_csv(
    curves: DissociationCurve | Sequence[DissociationCurve],
    path: str | Path,
    delimiter: str = ",",
    decimal: str = ".",
) -> None:
    """Export one column of saturation per curve against a shared PO2 column.

    ``delimiter=";"`` with ``decimal=","`` writes the semicolon/decimal-comma
    layout used by spreadsheet locales that treat the comma as decimal mark.
    """

    curves = _as_curves(curves)
    if delimiter == decimal:
        raise ValueError("delimiter and decimal must differ")
    po2 = curves[0].po2_mmhg
    for curve in curves[1:]:
        if not np.array_equal(curve.po2_mmhg, po2):
            raise ValueError(f"curve {curve.label!r} uses a different po2 grid")

    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle, delimiter=delimiter)
        writer.writerow(["po2_mmhg"] + [f"saturation_{curve.label}" for curve in curves])
        for idx in range(len(po2)):
            writer.writerow(
                [_format_number(po2[idx], decimal)]
                + [_format_number(curve.saturation[idx], decimal) for curve in curves]
            )
    logger.debug("wrote %d curve(s) with %d rows to %s", len(curves), len(po2), output_path)


def export_metadata_json(
    curves: DissociationCurve | Sequence[DissociationCurve],
    path: str | Path,
) -> None:
    """Export curve parameters and summary values to JSON."""

    curves = _as_curves(curves)
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    payload: dict[str, Any] = {
        "curves": [
            {
                "label": curve.label,
                "p50_mmhg": curve.p50_mmhg,
                "n_points": int(len(curve.po2_mmhg)),
                "po2_min_mmhg": float(curve.po2_mmhg[0]),
                "po2_max_mmhg": float(curve.po2_mmhg[-1]),
                "final_saturation": float(curve.saturation[-1]),
                "metadata": curve.metadata,
            }
            for curve in curves
        ],
    }

    with output_path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, sort_keys=True)
    logger.debug("wrote metadata for %d curve(s) to %s", len(curves), output_path)
