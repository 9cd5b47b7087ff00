import os

from reconviz.illustrate.constants import DiagramSettings

DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')


def get_data(*paths):
    return os.path.join(DATA_DIR, *paths)


def settings(**kwargs):
    return DiagramSettings(**kwargs)
