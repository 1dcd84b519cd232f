"""JSON configuration file for the 8-Queens benchmark pipeline.

Two sections are recognised; both are optional:

- benchmark_settings: ``runs``, ``solvers`` (list of labels), ``output_dir``.
- output_settings: ``date_in_filenames``, ``run_tag``.

The file is checked for shape only (objects and lists where expected). Value
checks against the known solvers live in
``eightqueens.analysis.cli.apply_configuration``.
"""
import json
from pathlib import Path

SECTIONS = ("benchmark_settings", "output_settings")


class ConfigManager:
    """Read a configuration file, or export one from effective settings.

    Parameters
    ----------
    config_path : str | os.PathLike, default "config.json"
        Path to the configuration file.
    must_exist : bool, default True
        When False, a missing file starts as an empty configuration instead
        of raising; used when exporting to a new path.
    """

    def __init__(self, config_path="config.json", must_exist=True):
        self.config_path = Path(config_path)
        if not must_exist and not self.config_path.exists():
            self.config = {}
        else:
            self.config = self.load_config()

    def load_config(self):
        """Parse the file and check the shape of its sections.

        Raises
        ------
        FileNotFoundError
            If the file does not exist.
        ValueError
            If the root or a known section is not a JSON object, or
            ``benchmark_settings.solvers`` is not a list.
        """
        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        with open(self.config_path, "r") as f:
            config = json.load(f)

        if not isinstance(config, dict):
            raise ValueError(f"{self.config_path} must hold a JSON object")
        for section in SECTIONS:
            if section in config and not isinstance(config[section], dict):
                raise ValueError(f"Section '{section}' must be a JSON object")
        solvers = config.get("benchmark_settings", {}).get("solvers")
        if solvers is not None and not isinstance(solvers, list):
            raise ValueError(f"benchmark_settings.solvers must be a list of labels, got {solvers!r}")
        return config

    def get_benchmark_settings(self):
        return self.config.get("benchmark_settings", {})

    def get_output_settings(self):
        return self.config.get("output_settings", {})

    def write_config(self, benchmark_settings, output_settings):
        """Replace both sections and write the file, keeping unknown keys."""
        self.config["benchmark_settings"] = dict(benchmark_settings)
        self.config["output_settings"] = dict(output_settings)
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w") as f:
            json.dump(self.config, f, indent=2)
            f.write("\n")
