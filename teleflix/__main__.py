from .kubernetes.build import run

run()
