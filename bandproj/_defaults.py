"""Built-in fallback values for every packaged config file.

Used by ``_config_loader`` when ``config/{name}.yaml`` cannot be read.
Keep in sync with the YAML files.
"""

CONFIGS: dict = {
    "kpath": {
        "label_separator": " | ",
    },
    "orbitals": {
        "lm_decomposed": ["s", "py", "pz", "px", "dxy", "dyz", "dz2", "dxz", "dx2-y2"],
        "l_decomposed": ["s", "p", "d"],
    },
}
