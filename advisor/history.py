"""
Historical statistics snapshots.

Each time session stats are reset they can be archived here. Records live in a
JSON file as ``{"nextId": int, "records": [...]}``; ids are auto-assigned and
never reused.
"""
from __future__ import annotations
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from .constants import HISTORY_FILE
from .state import SessionStats

log = logging.getLogger(__name__)


class HistoryImportError(ValueError):
    pass


NUMERIC_FIELDS = ("timestamp", "gamesPlayed", "wins", "losses", "pushes", "totalProfit")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _bad_fields(record: Dict[str, Any]) -> List[str]:
    return [k for k in NUMERIC_FIELDS if k in record and not _is_number(record[k])]


def format_win_rate(wins: int, games: int) -> str:
    return f"{(wins / games * 100) if games > 0 else 0.0:.1f}"


def make_record(stats: SessionStats, now: Optional[datetime] = None) -> Dict[str, Any]:
    now = now or datetime.now()
    return {
        "timestamp": int(now.timestamp() * 1000),
        "date": now.date().isoformat(),
        "time": now.strftime("%X"),
        "datetime": now.strftime("%c"),
        "gamesPlayed": stats.games_played,
        "wins": stats.wins,
        "losses": stats.losses,
        "pushes": stats.pushes,
        "totalProfit": stats.total_profit,
        "winRate": format_win_rate(stats.wins, stats.games_played),
    }


class StatsHistoryStore:
    def __init__(self, path: Path = HISTORY_FILE):
        self.path = Path(path)

    # --- storage ---
    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {"nextId": 1, "records": []}
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        raw = data.get("records", []) if isinstance(data, dict) else []
        records = []
        for r in raw if isinstance(raw, list) else []:
            if not isinstance(r, dict):
                log.warning("Skipping history entry that is not an object: %r", r)
                continue
            for key in _bad_fields(r):
                log.warning("History record %s has non-numeric %s=%r, using 0", r.get("id"), key, r[key])
                r[key] = 0
            records.append(r)
        next_id = data.get("nextId") if isinstance(data, dict) else None
        if not isinstance(next_id, int):
            next_id = int(max((r["id"] for r in records if _is_number(r.get("id"))), default=0)) + 1
        return {"nextId": next_id, "records": records}

    def _write(self, data: Dict[str, Any]) -> None:
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def _insert(self, data: Dict[str, Any], record: Dict[str, Any]) -> Dict[str, Any]:
        stored = {"id": data["nextId"], **{k: v for k, v in record.items() if k != "id"}}
        data["nextId"] += 1
        data["records"].append(stored)
        return stored

    # --- operations ---
    def add(self, stats: SessionStats, now: Optional[datetime] = None) -> Dict[str, Any]:
        data = self._read()
        record = self._insert(data, make_record(stats, now))
        self._write(data)
        log.info("Statistics record saved: %s", record["id"])
        return record

    def list_records(self) -> List[Dict[str, Any]]:
        """All records, newest first."""
        records = self._read()["records"]
        return sorted(records, key=lambda r: r.get("timestamp", 0), reverse=True)

    def delete(self, record_id: int) -> bool:
        data = self._read()
        kept = [r for r in data["records"] if r.get("id") != record_id]
        if len(kept) == len(data["records"]):
            return False
        data["records"] = kept
        self._write(data)
        log.info("Statistics record deleted: %s", record_id)
        return True

    def clear(self) -> None:
        data = self._read()
        data["records"] = []
        self._write(data)
        log.info("All statistics records cleared")

    def export_json(self) -> str:
        return json.dumps(self.list_records(), indent=2)

    def export_to(self, path: Path) -> int:
        records = self.list_records()
        with open(path, "w", encoding="utf-8") as f:
            json.dump(records, f, indent=2)
        log.info("Exported %d records to %s", len(records), path)
        return len(records)

    def import_json(self, text: str) -> int:
        """Append every record in a JSON array. Incoming ids are dropped and reassigned."""
        try:
            records = json.loads(text)
        except ValueError as e:
            raise HistoryImportError(f"Invalid JSON: {e}") from e
        if not isinstance(records, list):
            raise HistoryImportError("Invalid file format: expected a JSON array of records")
        if not all(isinstance(r, dict) for r in records):
            raise HistoryImportError("Invalid file format: every record must be an object")
        for i, record in enumerate(records):
            bad = _bad_fields(record)
            if bad:
                raise HistoryImportError(f"Record {i + 1}: {', '.join(bad)} must be numeric")

        data = self._read()
        for record in records:
            self._insert(data, record)
        self._write(data)
        log.info("Imported %d records", len(records))
        return len(records)

    def import_from(self, path: Path) -> int:
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read()
        except UnicodeDecodeError as e:
            raise HistoryImportError(f"File is not UTF-8 text: {e}") from e
        return self.import_json(text)

    def summary(self) -> Dict[str, Any]:
        records = self.list_records()
        total_games = sum(r.get("gamesPlayed", 0) for r in records)
        total_wins = sum(r.get("wins", 0) for r in records)
        return {
            "totalRecords": len(records),
            "totalProfit": sum(r.get("totalProfit", 0) for r in records),
            "totalGames": total_games,
            "totalWins": total_wins,
            "totalLosses": sum(r.get("losses", 0) for r in records),
            "overallWinRate": format_win_rate(total_wins, total_games),
            "oldestRecord": records[-1].get("datetime") if records else None,
            "newestRecord": records[0].get("datetime") if records else None,
        }
