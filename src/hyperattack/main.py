import logging

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field, NonNegativeInt

from hyperattack.checks import all_checks_pass, run_checks, summarize
from hyperattack.config import Settings
from hyperattack.constants import PIECE_ORDER, DiagonalMode, KnightMode
from hyperattack.registry import get_piece_info
from hyperattack.table import build_attack_table

logger = logging.getLogger(__name__)

settings = Settings()

app = FastAPI(title="Hyperattack")


# --- Request/Response models ---

class BoardConfig(BaseModel):
    diagonal_mode: DiagonalMode | None = None
    knight_mode: KnightMode | None = None
    side_length: int | None = Field(default=None, ge=1)


class TableRequest(BoardConfig):
    dimensions: list[NonNegativeInt] | None = None
    pieces: list[str] | None = None


class CheckRequest(BoardConfig):
    dimensions: list[NonNegativeInt] | None = None


def _resolve(cfg: BoardConfig) -> tuple[DiagonalMode, KnightMode, int]:
    """Fill unset fields from the application settings."""
    return (
        cfg.diagonal_mode or settings.diagonal_mode,
        cfg.knight_mode or settings.knight_mode,
        cfg.side_length or settings.side_length,
    )


# --- Endpoints ---

@app.get("/api/health")
async def health():
    return {"status": "ok"}


@app.get("/api/pieces")
async def list_pieces():
    return PIECE_ORDER


@app.get("/api/pieces/{name}")
async def piece_attacks(
    name: str,
    d: int = Query(default=2, ge=0),
    diagonal_mode: DiagonalMode | None = None,
    knight_mode: KnightMode | None = None,
    side_length: int | None = Query(default=None, ge=1),
):
    diagonal, knight, length = _resolve(BoardConfig(
        diagonal_mode=diagonal_mode, knight_mode=knight_mode, side_length=side_length,
    ))
    info = get_piece_info(name, diagonal, knight, length)
    if info is None:
        raise HTTPException(status_code=404, detail=f"Unknown piece: {name}")
    return {
        "piece": info.name,
        "dimension": d,
        "attacks": info.calculate(d),
        "formula": info.describe(),
        "diagonal_mode": info.diagonal_mode.value,
        "knight_mode": info.knight_mode.value,
        "side_length": info.side_length,
    }


@app.post("/api/table")
async def attack_table(req: TableRequest | None = None):
    req = req or TableRequest()
    diagonal, knight, length = _resolve(req)
    table = build_attack_table(
        dimensions=req.dimensions if req.dimensions is not None else settings.dimensions,
        diagonal_mode=diagonal,
        knight_mode=knight,
        side_length=length,
        pieces=req.pieces,
    )
    return table.to_dict()


@app.post("/api/checks")
async def self_checks(req: CheckRequest | None = None):
    req = req or CheckRequest()
    diagonal, knight, length = _resolve(req)
    results = run_checks(diagonal, knight, length, req.dimensions)
    passed, failed = summarize(results)
    if failed:
        logger.warning("%d of %d self-checks failed (%s, %s, l=%d)",
                       len(failed), len(results), diagonal.value, knight.value, length)
    return {
        "all_passed": all_checks_pass(results),
        "passed": passed,
        "failed": failed,
    }
