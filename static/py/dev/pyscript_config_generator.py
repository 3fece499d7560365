#!/usr/bin/env python3
"""
Generate pyscript-config.json for PyScript module loading
Maps every deck runtime module into the PyScript virtual filesystem
"""

import os
import json
import glob
from datetime import datetime

# Configuration
PYTHON_DIR = "static/py"
OUTPUT_FILE = "static/config/pyscript-config.json"
PACKAGES = ["pydantic", "pyyaml"]

# Modules the deck page cannot start without
REQUIRED_FILES = [
    "/static/py/initialization/bootstrap.py",
    "/static/py/core/step_state.py",
    "/static/py/core/navigation.py",
    "/static/py/core/projection.py",
    "/static/py/components/choice_widget.py",
    "/static/py/models/deck.py",
]


def scan_python_modules(python_dir=PYTHON_DIR):
    """Find all Python modules that need to be mapped in py-config"""
    py_files = sorted(glob.glob(os.path.join(python_dir, "**/*.py"), recursive=True))
    file_mappings = {}

    for py_file in py_files:
        relative_path = os.path.relpath(py_file, python_dir).replace('\\', '/')

        # Skip dev files
        if relative_path.startswith('dev/'):
            print(f"Skipping dev file: {py_file}")
            continue

        # Create mapping from server path to PyScript virtual path
        server_path = f"/static/py/{relative_path}"
        virtual_path = f"./{relative_path}"

        file_mappings[server_path] = virtual_path
        print(f"Mapped: {server_path} -> {virtual_path}")

    print(f"Found {len(file_mappings)} Python files to map")
    return file_mappings


def generate_pyconfig(file_mappings):
    """Generate PyScript configuration"""
    config = {
        "packages": list(PACKAGES),
        "files": file_mappings
    }

    return config


def validate_config(config):
    """Validate the generated configuration"""
    missing_files = [required for required in REQUIRED_FILES if required not in config["files"]]

    if missing_files:
        print("⚠️  Warning: Missing critical files:")
        for missing in missing_files:
            print(f"   - {missing}")
        return False

    print("✅ Configuration validation passed")
    return True


def write_config(config, output_file=OUTPUT_FILE):
    os.makedirs(os.path.dirname(output_file), exist_ok=True)
    with open(output_file, 'w') as f:
        json.dump(config, f, indent=2)


def main():
    """Generate the PyScript configuration file"""
    print("🔧 Generating PyScript configuration...")

    # Scan for Python modules
    file_mappings = scan_python_modules()

    # Generate PyScript config
    pyconfig = generate_pyconfig(file_mappings)

    # Validate configuration
    validate_config(pyconfig)

    # Write output
    write_config(pyconfig)

    print(f"📄 Generated {OUTPUT_FILE}")
    print(f"📊 Summary: {len(file_mappings)} Python files mapped")
    print(f"⏰ Generated on: {datetime.now().isoformat()}")


if __name__ == "__main__":
    main()
