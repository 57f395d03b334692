"""YAML utility functions."""


from ruamel.yaml import YAML


def load(source):
    yaml = _create_yaml()
    return yaml.load(source)


def _create_yaml():

    # We use the safe loader rather than the default round-trip one so
    # that loaded mappings and sequences are plain `dict` and `list`
    # objects, which is what `jsonschema` and our settings merging
    # expect. We also use the pure-Python implementation, which is
    # slower than the C implementation but less quirky. See
    # https://yaml.readthedocs.io/en/latest for details.
    return YAML(typ='safe', pure=True)
