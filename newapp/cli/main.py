"""Main CLI interface using Typer."""

from pathlib import Path
from typing import Optional, List

import typer
from rich.console import Console
from rich.table import Table

from ..core import get_environment, get_ports, get_resources, get_volumes, runs_as_root
from ..exporters import get_exporter
from ..k8s import K8sClient
from ..model.export import ExportFormat
from ..model.image import Image, ImageImportResult
from ..utils.logger import get_logger
from .options import build_config

# Create CLI app
app = typer.Typer(
    name="newapp",
    help="Generate the resources for deploying a container image",
    add_completion=True,
)

console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)

ROOT_WARNING = (
    "Image {image} runs as the root user which may not be permitted "
    "by your cluster administrator."
)


def _import_image(client: K8sClient, image: str) -> ImageImportResult:
    """Import image metadata, failing when the image cannot be found."""
    result = client.find_image(image)
    if not result.succeeded:
        raise RuntimeError(f"Image {image} not found: {result.message or result.status}")
    return result


def _warn_if_root(image_ref: str, image: Image) -> None:
    if runs_as_root(image):
        err_console.print(f"[yellow]Warning:[/yellow] {ROOT_WARNING.format(image=image_ref)}")


def _print_image_tables(image: Image) -> None:
    """Print ports, volumes and environment declared by an image."""
    ports = Table(title="Ports", show_header=True, header_style="bold magenta")
    ports.add_column("Port", style="cyan")
    ports.add_column("Protocol", style="white")
    for port in get_ports(image):
        ports.add_row(str(port.container_port), port.protocol)

    volumes = Table(title="Volumes", show_header=True, header_style="bold magenta")
    volumes.add_column("Mount Path", style="cyan")
    for path in get_volumes(image) or {}:
        volumes.add_row(path)

    env = Table(title="Environment", show_header=True, header_style="bold magenta")
    env.add_column("Name", style="cyan")
    env.add_column("Value", style="green")
    for var in get_environment(image):
        env.add_row(var.name, var.value)

    console.print(ports)
    console.print(volumes)
    console.print(env)


@app.command()
def inspect(
    image: str = typer.Argument(..., help="Image to inspect (e.g., mysql:8.0)"),
    namespace: Optional[str] = typer.Option(
        None, "--namespace", "-n", help="Namespace used for the image import"
    ),
    context: Optional[str] = typer.Option(
        None, "--context", "-c", help="Kubernetes context to use"
    ),
):
    """Show what an image declares: user, ports, volumes and environment."""
    try:
        with console.status(f"[bold green]Importing {image}..."):
            client = K8sClient(context=context, namespace=namespace)
            result = _import_image(client, image)

        console.print(f"Image: [cyan]{result.name}[/cyan]  Tag: [cyan]{result.tag}[/cyan]")
        if result.image.docker_image_reference:
            console.print(f"Resolved: [cyan]{result.image.docker_image_reference}[/cyan]")

        _warn_if_root(image, result.image)
        _print_image_tables(result.image)

    except Exception as e:
        console.print(f"[red]Error:[/red] {str(e)}")
        raise typer.Exit(1)


@app.command()
def generate(
    image: str = typer.Argument(..., help="Image to deploy (e.g., mysql:8.0)"),
    name: Optional[str] = typer.Option(
        None, "--name", help="Application name (default: derived from the image)"
    ),
    tag: Optional[str] = typer.Option(
        None, "--tag", "-t", help="Image stream tag (default: the image tag or latest)"
    ),
    from_namespace: Optional[str] = typer.Option(
        None,
        "--from-namespace",
        help="Reuse the existing image stream IMAGE in this namespace instead of creating one",
    ),
    ports: List[str] = typer.Option(
        [], "--port", "-p", help="Container port, e.g. 8080 or 53/udp (can be used multiple times)"
    ),
    volumes: List[str] = typer.Option(
        [], "--volume", "-v", help="Container path backed by an emptyDir volume"
    ),
    env: List[str] = typer.Option([], "--env", "-e", help="Environment variable KEY=VALUE"),
    labels: List[str] = typer.Option(
        [], "--label", "-l", help="Label KEY=VALUE for every resource"
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", help="YAML file with default values for the options above"
    ),
    inspect_image: bool = typer.Option(
        False,
        "--inspect/--no-inspect",
        help="Import the image to pick up its ports, volumes and environment",
    ),
    namespace: Optional[str] = typer.Option(
        None, "--namespace", "-n", help="Namespace used for the image import"
    ),
    context: Optional[str] = typer.Option(
        None, "--context", "-c", help="Kubernetes context to use"
    ),
    format: ExportFormat = typer.Option(
        ExportFormat.YAML, "--format", "-f", help="Output format for the resources"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the resources to this file instead of stdout"
    ),
):
    """Generate the resources for deploying an image without creating them."""
    try:
        image_metadata = None
        if inspect_image:
            client = K8sClient(context=context, namespace=namespace)
            image_metadata = _import_image(client, image).image
            _warn_if_root(image, image_metadata)

        config = build_config(
            image,
            name=name,
            tag=tag,
            from_namespace=from_namespace,
            ports=ports,
            volumes=volumes,
            env=env,
            labels=labels,
            config_file=config_file,
            image_metadata=image_metadata,
        )
        resources = get_resources(config)
        exporter = get_exporter(format)

        if output:
            exporter.export(resources, output)
            err_console.print(f"[green]✓[/green] Resources written to: [cyan]{output}[/cyan]")
        else:
            typer.echo(exporter.render(resources), nl=False)

    except Exception as e:
        err_console.print(f"[red]Error:[/red] {str(e)}")
        raise typer.Exit(1)


@app.command()
def create(
    image: str = typer.Argument(..., help="Image to deploy (e.g., mysql:8.0)"),
    name: Optional[str] = typer.Option(
        None, "--name", help="Application name (default: derived from the image)"
    ),
    tag: Optional[str] = typer.Option(
        None, "--tag", "-t", help="Image stream tag (default: the image tag or latest)"
    ),
    from_namespace: Optional[str] = typer.Option(
        None,
        "--from-namespace",
        help="Reuse the existing image stream IMAGE in this namespace instead of creating one",
    ),
    ports: List[str] = typer.Option(
        [], "--port", "-p", help="Container port, e.g. 8080 or 53/udp (can be used multiple times)"
    ),
    volumes: List[str] = typer.Option(
        [], "--volume", "-v", help="Container path backed by an emptyDir volume"
    ),
    env: List[str] = typer.Option([], "--env", "-e", help="Environment variable KEY=VALUE"),
    labels: List[str] = typer.Option(
        [], "--label", "-l", help="Label KEY=VALUE for every resource"
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", help="YAML file with default values for the options above"
    ),
    inspect_image: bool = typer.Option(
        True,
        "--inspect/--no-inspect",
        help="Import the image to pick up its ports, volumes and environment",
    ),
    namespace: Optional[str] = typer.Option(
        None, "--namespace", "-n", help="Namespace to create the resources in"
    ),
    context: Optional[str] = typer.Option(
        None, "--context", "-c", help="Kubernetes context to use"
    ),
):
    """Generate the resources for deploying an image and create them."""
    try:
        client = K8sClient(context=context, namespace=namespace)

        image_metadata = None
        if inspect_image:
            with console.status(f"[bold green]Importing {image}..."):
                image_metadata = _import_image(client, image).image
            _warn_if_root(image, image_metadata)

        config = build_config(
            image,
            name=name,
            tag=tag,
            from_namespace=from_namespace,
            ports=ports,
            volumes=volumes,
            env=env,
            labels=labels,
            config_file=config_file,
            image_metadata=image_metadata,
        )
        resources = get_resources(config)

        with console.status(f"[bold green]Creating {len(resources)} resources..."):
            success, output = client.create_list(resources)

        if not success:
            raise RuntimeError(f"Failed to create resources: {output.strip()}")

        table = Table(title=f"Created {config.name}", show_header=True, header_style="bold magenta")
        table.add_column("Kind", style="cyan")
        table.add_column("Name", style="green")
        for resource in resources:
            table.add_row(resource.kind, resource.name)
        console.print(table)

    except Exception as e:
        console.print(f"[red]Error:[/red] {str(e)}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
