"""Print the OpenAPI spec file auto-discovery would serve.

Usage:
    python -m scalar_docs.cli.list_specs
"""

from scalar_docs.auto.auto_discovery import AutoDiscovery


def main():
    discovery = AutoDiscovery()

    if discovery.is_initialized():
        print("Auto-discovered OpenAPI specification files:")
        for i, path in enumerate(discovery.get_found_spec_files()):
            if i == 0:
                print(f"  - {path} (selected)")
            else:
                print(f"  - {path}")
    elif (error := discovery.get_init_error()) is not None:
        print(f"Initialization error: {error}")
    else:
        print("No valid OpenAPI specification file found")


if __name__ == "__main__":
    main()
