import argparse, os, sys
from ..lib.environment import Environment
from .build_vars import build_config
from .create_manifests import create_manifests
from .utils import parse_bool_env_var

DEBUG = parse_bool_env_var('DEBUG')

def write_manifests(manifests: dict[str, str], output_dir: str) -> list[str]:
    os.makedirs(output_dir, exist_ok=True)
    written = []
    for name, content in manifests.items():
        file_path = os.path.join(output_dir, f'{name}.yaml')
        with open(file_path, 'w') as f:
            f.write(content)
        print(f'Generated: {file_path}')
        written.append(file_path)
    return written

def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='teleflix',
        description='Kubernetes manifest generator for a Jellyfin, Sonarr, Radarr, Jackett and qBittorrent stack')
    parser.add_argument('-c', '--config', default='config.yaml', help='configuration file, defaults are used when it does not exist')
    parser.add_argument('-o', '--output', default='./manifests', help='output directory')
    parser.add_argument('-n', '--namespace', default=None, help='kubernetes namespace')
    parser.add_argument('-s', '--storage-class', default=None, help='storage class of the persistent volume claims')
    parser.add_argument('--env-file', default=None, help='dotenv file providing values for {{ KEY }} placeholders in the configuration')
    return parser

def main(argv: list[str] | None = None):
    args = get_parser().parse_args(argv)

    env = Environment.from_os()
    if args.env_file:
        env.load_env_file(args.env_file)

    config = build_config(args.config, env, namespace=args.namespace, storage_class=args.storage_class)

    # generate everything before touching the output directory
    manifests = create_manifests(config)
    write_manifests(manifests, args.output)

    print(f'\nAll manifests were generated in {args.output}')
    print('\nTo deploy:')
    print(f'kubectl apply -f {args.output}/')


def run():
    if DEBUG:
        main()
    else:
        try:
            main()
        # discard stack trace
        except Exception as e:
            print(f"{type(e).__name__}:", e, file=sys.stderr)
            sys.exit(1)

if __name__ == '__main__':
    run()
