import argparse
import json
import logging
from importlib.metadata import version

from google.cloud import container_v1
from rich.console import Console
from rich.table import Table

from .builders import build_cluster, cluster_parent
from .config import load_config
from .logger import logger
from .resolver import resolve_node_pools
from .schemas.node_pool import ResolvedNodePool


def _pool_table(pools: list[ResolvedNodePool], title: str) -> Table:
    table = Table(title=title)
    table.add_column("Name", style="cyan")
    table.add_column("Machine Type", style="green")
    table.add_column("Image")
    table.add_column("Disk")
    table.add_column("Preemptible")
    table.add_column("Accelerators")
    table.add_column("Nodes", justify="right")

    for p in pools:
        accels = ", ".join(f"{a.count}x {a.type}" for a in p.guest_accelerators)
        bounds = p.autoscaling_bounds
        nodes = f"{bounds['min']}-{bounds['max']} (auto)" if bounds else str(p.node_count)
        table.add_row(
            p.name,
            p.machine_type,
            p.image_type,
            f"{p.disk_size_gb}GB ({p.disk_type})",
            "yes" if p.preemptible else "no",
            accels or "-",
            nodes,
        )
    return table


def main() -> None:
    parser = argparse.ArgumentParser(
        description="privategke: Private GKE cluster and node pool resolver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show the resolved node pools for a cluster
  privategke --config cluster.json

  # Resolved node pools as JSON
  privategke --config cluster.json --json

  # Full container_v1 Cluster request body
  privategke --config cluster.json --payload
""",
    )
    try:
        ver = version("privategke")
    except Exception:
        ver = "unknown"
    parser.add_argument("--version", action="version", version=f"privategke v{ver}")

    parser.add_argument(
        "--config", required=True, help="Cluster inputs as a JSON file"
    )

    group = parser.add_mutually_exclusive_group(required=False)
    group.add_argument(
        "--json", action="store_true", help="Output resolved node pools as JSON"
    )
    group.add_argument(
        "--payload",
        action="store_true",
        help="Output the GKE Cluster request body as JSON",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    if args.verbose:
        logger.setLevel(logging.DEBUG)

    # Keep stderr quiet when stdout carries machine-readable output
    log_console = Console(stderr=True, quiet=args.json or args.payload)
    out_console = Console()

    try:
        config = load_config(args.config)
        log_console.print(
            f"[bold green]privategke[/bold green] {config.name} "
            f"({cluster_parent(config)})"
        )

        if args.payload:
            cluster = build_cluster(config)
            print(container_v1.Cluster.to_json(cluster))
            return

        pools = resolve_node_pools(config.node_pools)
        if args.json:
            print(json.dumps([p.to_dict() for p in pools], indent=2))
            return

        out_console.print(_pool_table(pools, f"Node Pools ({len(pools)})"))
    except Exception as e:
        logger.error(f"Resolve Failed: {e}")
        exit(1)
    except KeyboardInterrupt:
        log_console.print("\n[bold red]Operation cancelled by user.[/bold red]")
        exit(130)


if __name__ == "__main__":
    main()
