"""FastAPI app for the Dynasty CRM blueprint layer."""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.middleware.base import BaseHTTPMiddleware

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def _load_env_file(path: Path) -> None:
    if not path.exists():
        return
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key and key not in os.environ:
            os.environ[key] = value


_load_env_file(ROOT / "app" / ".env")

import logging
import time

from app.records_validation import validate_record_payload as _validate_record_payload
from app.simulation import SIMULATION_DATA, simulation_counts, simulation_rows
from app.stores import MemoryRecordStore
from blueprint_resolver import TENANT_BLUEPRINTS, Blueprint, blueprint_to_dict, resolve
from dashboard_view import build_dashboard_view
from dynasty.blueprint_hash import etag_for, etag_matches
from entity_list import build_list_view
from entity_profile import build_profile_view
from record_filters import count_matching
from tenant_router import normalize_slug, route


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


LOG_LEVEL = os.getenv("DYNASTY_LOG_LEVEL", "INFO").strip().upper() or "INFO"
SIMULATION_DEFAULT = _env_flag("DYNASTY_SIMULATION_DEFAULT")
SEED_DEMO = _env_flag("DYNASTY_SEED_DEMO")

app = FastAPI(title="Dynasty CRM")
logger = logging.getLogger("dynasty")
_records_logger = logging.getLogger("dynasty.records")
logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))

_LOCAL_CORS_ORIGINS = {
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
}
_LOCAL_CORS_REGEX = re.compile(r"^http://(localhost|127\.0\.0\.1):\d+$")
_EXTRA_CORS_ORIGINS = {
    origin.strip().rstrip("/")
    for origin in os.getenv("DYNASTY_CORS_ORIGINS", "").split(",")
    if origin.strip()
}
_CORS_ORIGINS = _LOCAL_CORS_ORIGINS | _EXTRA_CORS_ORIGINS


class RequestTimingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        total_ms = (time.perf_counter() - start) * 1000
        response.headers["X-Req-MS"] = f"{total_ms:.1f}"
        logger.debug("request method=%s path=%s status=%s ms=%.1f", request.method, request.url.path, response.status_code, total_ms)
        return response


app.add_middleware(RequestTimingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=sorted(_CORS_ORIGINS),
    allow_origin_regex=_LOCAL_CORS_REGEX.pattern,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

records = MemoryRecordStore()


def seed_demo_data(store: MemoryRecordStore) -> int:
    """Load the demo dataset into ``store`` for every dedicated tenant."""
    written = 0
    for slug in TENANT_BLUEPRINTS:
        blueprint = resolve(slug)
        data = SIMULATION_DATA.get(blueprint.business_id, {})
        written += store.seed(slug, {k: v for k, v in data.items() if blueprint.is_enabled(k)})
    return written


if SEED_DEMO:
    logger.info("demo_seeded rows=%s", seed_demo_data(records))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("unhandled_error path=%s", request.url.path)
    return _error_response("INTERNAL_ERROR", "Unexpected server error", detail={"error": str(exc)}, status=500)


def _error_response(
    code: str,
    message: str,
    path: str | None = None,
    detail: dict | None = None,
    status: int = 400,
    toast: dict | None = None,
) -> JSONResponse:
    body = {
        "ok": False,
        "errors": [{"code": code, "message": message, "path": path, "detail": detail}],
        "warnings": [],
    }
    if toast:
        body["toast"] = toast
    return JSONResponse(jsonable_encoder(body), status_code=status)


def _ok_response(payload: dict, warnings: list | None = None, status: int = 200, headers: dict | None = None) -> JSONResponse:
    body = {"ok": True, **payload, "errors": [], "warnings": warnings or []}
    return JSONResponse(jsonable_encoder(body), status_code=status, headers=headers)


def _validation_response(errors: list, toast: dict | None = None, status: int = 400) -> JSONResponse:
    body = {
        "ok": False,
        "code": "VALIDATION_FAILED",
        "errors": errors,
        "warnings": [],
        "data": None,
    }
    if toast:
        body["toast"] = toast
    return JSONResponse(jsonable_encoder(body), status_code=status)


def _toast(level: str, message: str) -> dict:
    return {"level": level, "message": message}


async def _safe_json(request: Request) -> dict:
    try:
        return await request.json()
    except Exception:
        return {}


def _parse_bool(value: str | None, default: bool) -> bool:
    if value is None or not str(value).strip():
        return default
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def _tenant_key(blueprint: Blueprint) -> str:
    return blueprint.tenant_slug


def _resolve(slug: str) -> Blueprint:
    blueprint = resolve(slug)
    logger.info("blueprint_resolved slug=%s category=%s fallback=%s", blueprint.tenant_slug, blueprint.category, blueprint.is_fallback)
    return blueprint


def _rows_for(blueprint: Blueprint, entity_type: str, simulation: bool) -> list[dict]:
    if simulation:
        return simulation_rows(blueprint, entity_type)
    return records.list(entity_type, tenant_id=_tenant_key(blueprint))


def _find_row(blueprint: Blueprint, entity_type: str, record_id: str, simulation: bool) -> dict | None:
    if simulation:
        return next((r for r in simulation_rows(blueprint, entity_type) if str(r.get("id")) == record_id), None)
    return records.get(entity_type, record_id, tenant_id=_tenant_key(blueprint))


def _counts_for(blueprint: Blueprint, simulation: bool) -> tuple[dict, dict]:
    if simulation:
        counts = simulation_counts(blueprint)
    else:
        counts = records.counts(_tenant_key(blueprint), blueprint.enabled_entity_types)
    filtered = {}
    for kpi in blueprint.kpi_config:
        if kpi.filter and blueprint.is_enabled(kpi.entity_type):
            filtered[kpi.key] = count_matching(_rows_for(blueprint, kpi.entity_type, simulation), kpi.filter)
    return counts, filtered


def _entity_not_enabled(entity_type: str) -> JSONResponse:
    return _error_response("ENTITY_NOT_ENABLED", f"Entity type not enabled: {entity_type}", "entity_type", status=404)


def _simulation_read_only() -> JSONResponse:
    return _error_response(
        "SIMULATION_READ_ONLY",
        "Simulation data cannot be modified",
        "simulation",
        status=409,
        toast=_toast("error", "Simulation mode is read-only"),
    )


@app.get("/health")
async def health() -> dict:
    return {"ok": True}


@app.get("/tenants/{slug}/route")
async def tenant_route(slug: str) -> JSONResponse:
    variant = route(slug)
    return _ok_response({"tenant_slug": normalize_slug(slug), "variant": variant.value})


@app.get("/tenants/{slug}/blueprint")
async def tenant_blueprint(request: Request, slug: str):
    payload = blueprint_to_dict(_resolve(slug))
    etag = etag_for(payload["fingerprint"])
    if etag_matches(request.headers.get("if-none-match"), payload["fingerprint"]):
        return Response(status_code=304, headers={"ETag": etag})
    return _ok_response({"blueprint": payload}, headers={"ETag": etag})


@app.get("/crm/{slug}")
async def crm_dashboard(slug: str, simulation: str | None = None) -> JSONResponse:
    blueprint = _resolve(slug)
    sim = _parse_bool(simulation, SIMULATION_DEFAULT)
    counts, filtered = _counts_for(blueprint, sim)
    view = build_dashboard_view(blueprint, counts, filtered)
    return _ok_response({"dashboard": view, "simulation": sim})


@app.get("/crm/{slug}/{entity_type}")
async def crm_entity_list(
    slug: str,
    entity_type: str,
    q: str = "",
    status: str = "all",
    view: str | None = None,
    sort: str | None = None,
    direction: str | None = None,
    simulation: str | None = None,
) -> JSONResponse:
    blueprint = _resolve(slug)
    if not blueprint.is_enabled(entity_type):
        return _entity_not_enabled(entity_type)
    sim = _parse_bool(simulation, SIMULATION_DEFAULT)
    rows = _rows_for(blueprint, entity_type, sim)
    payload = build_list_view(
        blueprint,
        entity_type,
        rows,
        search=q,
        status=status,
        saved_view=view,
        sort=sort,
        direction=direction,
    )
    return _ok_response({"list": payload, "simulation": sim})


@app.get("/crm/{slug}/{entity_type}/{record_id}")
async def crm_entity_profile(slug: str, entity_type: str, record_id: str, simulation: str | None = None) -> JSONResponse:
    blueprint = _resolve(slug)
    if not blueprint.is_enabled(entity_type):
        return _entity_not_enabled(entity_type)
    sim = _parse_bool(simulation, SIMULATION_DEFAULT)
    row = _find_row(blueprint, entity_type, record_id, sim)
    if row is None:
        return _error_response("RECORD_NOT_FOUND", "Record not found", "record_id", status=404)
    return _ok_response({"profile": build_profile_view(blueprint, entity_type, row), "simulation": sim})


@app.post("/crm/{slug}/{entity_type}")
async def crm_entity_create(request: Request, slug: str, entity_type: str, simulation: str | None = None) -> JSONResponse:
    blueprint = _resolve(slug)
    schema = blueprint.get_entity_schema(entity_type)
    if schema is None:
        return _entity_not_enabled(entity_type)
    if _parse_bool(simulation, SIMULATION_DEFAULT):
        return _simulation_read_only()
    body = await _safe_json(request)
    data = body.get("record") if isinstance(body, dict) and "record" in body else body
    errors, clean = _validate_record_payload(schema, data, for_create=True, stages=blueprint.get_pipeline(entity_type))
    if errors:
        _records_logger.warning(
            "validation_failed tenant=%s entity_type=%s codes=%s payload_keys=%s",
            blueprint.tenant_slug,
            entity_type,
            sorted({err.get("code") for err in errors}),
            sorted(data.keys()) if isinstance(data, dict) else [],
        )
        return _validation_response(errors, toast=_toast("error", f"Could not create {schema.label.lower()}"))
    clean = {k: v for k, v in clean.items() if k not in ("id", "created_at", "updated_at")}
    record = records.create(entity_type, clean, tenant_id=_tenant_key(blueprint))
    _records_logger.info("record_created tenant=%s entity_type=%s record_id=%s", blueprint.tenant_slug, entity_type, record["id"])
    return _ok_response(
        {"record_id": record["id"], "record": record, "toast": _toast("success", f"{schema.label} created")},
        status=201,
    )


@app.patch("/crm/{slug}/{entity_type}/{record_id}")
async def crm_entity_update(
    request: Request, slug: str, entity_type: str, record_id: str, simulation: str | None = None
) -> JSONResponse:
    blueprint = _resolve(slug)
    schema = blueprint.get_entity_schema(entity_type)
    if schema is None:
        return _entity_not_enabled(entity_type)
    if _parse_bool(simulation, SIMULATION_DEFAULT):
        return _simulation_read_only()
    body = await _safe_json(request)
    data = body.get("record") if isinstance(body, dict) and "record" in body else body
    errors, clean = _validate_record_payload(schema, data, for_create=False, stages=blueprint.get_pipeline(entity_type))
    if errors:
        _records_logger.warning(
            "validation_failed tenant=%s entity_type=%s record_id=%s codes=%s",
            blueprint.tenant_slug,
            entity_type,
            record_id,
            sorted({err.get("code") for err in errors}),
        )
        return _validation_response(errors, toast=_toast("error", f"Could not update {schema.label.lower()}"))
    clean = {k: v for k, v in clean.items() if k not in ("id", "created_at", "updated_at")}
    try:
        record = records.update(entity_type, record_id, clean, tenant_id=_tenant_key(blueprint))
    except KeyError:
        return _error_response("RECORD_NOT_FOUND", "Record not found", "record_id", status=404)
    _records_logger.info(
        "record_updated tenant=%s entity_type=%s record_id=%s fields=%s",
        blueprint.tenant_slug,
        entity_type,
        record_id,
        sorted(clean.keys()),
    )
    return _ok_response({"record_id": record_id, "record": record, "toast": _toast("success", f"{schema.label} updated")})


@app.delete("/crm/{slug}/{entity_type}/{record_id}")
async def crm_entity_delete(slug: str, entity_type: str, record_id: str, simulation: str | None = None) -> JSONResponse:
    blueprint = _resolve(slug)
    schema = blueprint.get_entity_schema(entity_type)
    if schema is None:
        return _entity_not_enabled(entity_type)
    if _parse_bool(simulation, SIMULATION_DEFAULT):
        return _simulation_read_only()
    try:
        records.delete(entity_type, record_id, tenant_id=_tenant_key(blueprint))
    except KeyError:
        return _error_response("RECORD_NOT_FOUND", "Record not found", "record_id", status=404)
    _records_logger.info("record_deleted tenant=%s entity_type=%s record_id=%s", blueprint.tenant_slug, entity_type, record_id)
    return _ok_response({"record_id": record_id, "toast": _toast("success", f"{schema.label} deleted")})
