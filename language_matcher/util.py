import os

DATA_ROOT = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data')


def data_filename(filename):
    return os.path.join(DATA_ROOT, filename)
