import json
import os
import sys

import typer
import yaml

from aamva_decoder.commons.aamva_engine import AAMVAEngine
from aamva_decoder.commons.logger import setup_logging_from_cfg
from aamva_decoder.validation.errors import AAMVAError
from aamva_decoder.validation.validators import validate_header_or_raise

app = typer.Typer(add_completion=False, help="AAMVA DL/ID barcode decoder")

DEFAULT_CONFIG = "aamva_decoder/configs/settings.yaml"


def resource_path(relative_path: str) -> str:
    """Devuelve la ruta absoluta a un recurso, ya sea ejecutando como .exe o en desarrollo"""
    if hasattr(sys, "_MEIPASS"):
        # Si es un ejecutable generado por PyInstaller
        base_path = sys._MEIPASS
    else:
        base_path = os.path.abspath(".")

    return os.path.join(base_path, relative_path)


def load_cfg(path: str = DEFAULT_CONFIG) -> dict:
    with open(resource_path(path), "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _decode_bytes(payload: bytes) -> str:
    # Los lectores suelen entregar ASCII; latin-1 como respaldo
    try:
        return payload.decode("utf-8")
    except UnicodeDecodeError:
        return payload.decode("latin-1")


def _read_payload(source: str) -> str:
    # binario: conservar los CR, que son separadores de registro
    if source == "-":
        return _decode_bytes(sys.stdin.buffer.read())
    with open(source, "rb") as f:
        return _decode_bytes(f.read())


@app.command()
def decode(
    source: str = typer.Argument(..., help="archivo con el contenido del PDF-417, o '-' para stdin"),
    config: str = typer.Option(DEFAULT_CONFIG, help="settings YAML"),
    strict_dob: bool = typer.Option(False, "--strict-dob", help="rechaza fechas de nacimiento ilegibles"),
    payload: bool = typer.Option(False, "--payload", help="imprime el payload de customer-verify"),
):
    cfg = load_cfg(config)
    if strict_dob:
        cfg.setdefault("decoder", {})["dob_policy"] = "strict"
    logger = setup_logging_from_cfg(cfg)

    engine = AAMVAEngine(cfg)
    raw = _read_payload(source)
    try:
        identity = engine.parse(raw)
    except AAMVAError as e:
        logger.log("ERROR", f"No se pudo decodificar {source}: [{e.kind}] {e}")
        raise typer.Exit(code=1)

    out = engine.to_customer_payload(identity) if payload else identity.to_dict()
    typer.echo(json.dumps(out, ensure_ascii=False, indent=2))


@app.command()
def header(
    source: str = typer.Argument(..., help="archivo o '-' para stdin"),
    config: str = typer.Option(DEFAULT_CONFIG, help="settings YAML"),
):
    """Muestra el header AAMVA (IIN, versiones, subfiles) sin decodificar los campos."""
    cfg = load_cfg(config)
    logger = setup_logging_from_cfg(cfg)
    window = AAMVAEngine(cfg).decoder_settings.header_search_window
    try:
        hdr = validate_header_or_raise(_read_payload(source), window)
    except AAMVAError as e:
        logger.log("ERROR", f"Header inválido en {source}: [{e.kind}] {e}")
        raise typer.Exit(code=1)
    typer.echo(json.dumps(hdr.model_dump(exclude={"body"}), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    app()
