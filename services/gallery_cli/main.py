"""
Gallery CLI - Upload, list and delete images in the storage bucket

Command-line counterpart of the upload and gallery screens:
- upload: send one image, print its public URL
- list:   show the bucket contents (first 100 objects)
- delete: remove objects by name

Usage:
    imgbase upload photos/cat.jpg
    imgbase list
    imgbase delete cat.jpg dog.png
"""

import asyncio
import logging
import mimetypes
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from config.settings import get_settings
from core.interfaces.storage import DEFAULT_MIME_TYPE, BaseStorageClient
from core.models.results import (
    DeleteResult,
    DeleteSuccess,
    ListResult,
    ListSuccess,
    StorageFailure,
    UploadResult,
    UploadSuccess,
)
from factory.client_factory import create_storage_client
from providers.supabase.storage import default_object_name

logger = logging.getLogger(__name__)

console = Console()

app = typer.Typer(
    name="imgbase",
    help="Upload and manage images in an object storage bucket",
    add_completion=False,
)


def configure_logging(level: str, log_dir: str) -> None:
    """Console handler at the configured level, errors also to a rotating file"""
    os.makedirs(log_dir, exist_ok=True)

    fmt = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(fmt)

    file_handler = RotatingFileHandler(
        os.path.join(log_dir, "imgbase_errors.log"),
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=3,
    )
    file_handler.setLevel(logging.ERROR)
    file_handler.setFormatter(fmt)

    logging.basicConfig(level=level.upper(), handlers=[console_handler, file_handler])


def _open_client() -> BaseStorageClient:
    try:
        return create_storage_client()
    except ValueError as e:
        console.print(f"Configuration error: {e}", style="red", markup=False)
        raise typer.Exit(code=2)


def _fail(failure: StorageFailure) -> None:
    console.print(failure.message, style="red", markup=False)
    raise typer.Exit(code=1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    settings = get_settings()
    configure_logging("DEBUG" if verbose else settings.LOG_LEVEL, settings.LOG_DIR)


@app.command()
def upload(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Image file to upload"),
    name: str | None = typer.Option(None, "--name", "-n", help="Object name (default: file name)"),
    mime_type: str | None = typer.Option(None, "--mime-type", help="Content type (default: guessed)"),
) -> None:
    """Upload an image and print its public URL."""
    try:
        data = path.read_bytes()
    except OSError as e:
        console.print(f"Cannot read file: {e}", style="red", markup=False)
        raise typer.Exit(code=1)

    object_name = name or path.name or default_object_name()
    content_type = mime_type or mimetypes.guess_type(object_name)[0] or DEFAULT_MIME_TYPE
    logger.debug(f"Uploading {path} as {object_name} ({content_type}, {len(data)} bytes)")

    async def _run() -> tuple[UploadResult, str]:
        async with _open_client() as client:
            result = await client.upload_image(object_name, data, content_type)
            return result, client.public_url(object_name)

    result, url = asyncio.run(_run())

    match result:
        case UploadSuccess():
            console.print("[green]Upload complete![/green]")
            console.print(url)
        case StorageFailure():
            _fail(result)


@app.command("list")
def list_images() -> None:
    """List images in the bucket (first 100)."""

    async def _run() -> tuple[ListResult, list[str]]:
        async with _open_client() as client:
            result = await client.list_images()
            urls = [client.public_url(n) for n in result.items] if result.ok else []
            return result, urls

    result, urls = asyncio.run(_run())

    match result:
        case ListSuccess(items=[]):
            console.print("Bucket is empty")
        case ListSuccess(items=items):
            table = Table(title=f"{len(items)} images")
            table.add_column("Name")
            table.add_column("Public URL", overflow="fold")
            for item, url in zip(items, urls):
                table.add_row(item, url)
            console.print(table)
        case StorageFailure():
            _fail(result)


@app.command()
def delete(
    names: list[str] = typer.Argument(..., help="Object names to delete"),
) -> None:
    """Delete images by name."""

    async def _run() -> DeleteResult:
        async with _open_client() as client:
            return await client.delete_images(names)

    result = asyncio.run(_run())

    match result:
        case DeleteSuccess():
            console.print(f"[green]Deleted ({len(names)})[/green]")
        case StorageFailure():
            _fail(result)


if __name__ == "__main__":
    app()
