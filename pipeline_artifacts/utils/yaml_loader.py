from ruamel.yaml import YAML

def get_yaml_instance(preserve_quotes: bool = True) -> YAML:
    yaml = YAML(typ="rt")
    yaml.default_flow_style = False
    yaml.preserve_quotes = preserve_quotes
    yaml.width = 4096
    yaml.indent(mapping=2, sequence=4, offset=2)
    return yaml
