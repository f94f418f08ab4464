import yaml
from typing import Any

from .errors import SerializationError

DOCUMENT_SEPARATOR = '---\n'

def _represent_str(dumper, data):
    """
        configures yaml for dumping multiline strings as block literals
        Ref: https://stackoverflow.com/questions/8640959/how-can-i-control-what-scalar-form-pyyaml-uses-for-my-data

        trailing newlines are not stripped, so strings that have them go back to the default style.
    """
    if data.count('\n') > 0:
        return dumper.represent_scalar('tag:yaml.org,2002:str', data, style='|')
    return dumper.represent_scalar('tag:yaml.org,2002:str', data)

class ManifestDumper(yaml.SafeDumper):
    def ignore_aliases(self, data):
        return True

ManifestDumper.add_representer(str, _represent_str)

# deep merge two dictionaries created from yaml
# mappings are merged, lists and primitives are taken from d2
def deep_merge(d1, d2):
    result = d1.copy()
    for k, v in d2.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = deep_merge(result[k], v)
            continue
        result[k] = v
    return result

def describe_manifest(manifest: dict[str, Any]) -> str:
    kind = manifest.get('kind', '<unknown kind>')
    name = (manifest.get('metadata') or {}).get('name', '<unnamed>')
    return f"{kind}/{name}"

def dump_manifest(manifest: dict[str, Any]) -> str:
    try:
        return yaml.dump(manifest, default_flow_style=False, Dumper=ManifestDumper)
    except yaml.YAMLError as e:
        raise SerializationError(f"Failed to serialize {describe_manifest(manifest)}: {e}") from e

def dump_documents(manifests: list[dict[str, Any]]) -> str:
    return DOCUMENT_SEPARATOR.join(dump_manifest(m) for m in manifests)
