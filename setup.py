#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib

HERE = pathlib.Path(__file__).parent.absolute()

NOTEDELTA_PATH = HERE / "notedelta"


def get_version(path):
    namespace = {}
    exec(path.read_text(encoding='utf-8'), namespace)
    return namespace['__version__']


VERSION = get_version(NOTEDELTA_PATH / '_version.py')

with open(HERE / 'README.md', encoding='utf-8') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='notedelta',
      version=VERSION,
      description='Compose and apply retain/insert/remove deltas to text and note records',
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      license='BSD-3-Clause',
      python_requires='>=3.8',
      packages=find_packages(include=['notedelta', 'notedelta.*']),
      package_data={'notedelta': ['*.schema.json']},
      install_requires=[
          'colorama',
          'jupyter_core',
          'traitlets>=5',
      ],
      extras_require={
          'test': [
              'jsonschema',
              'pytest>=6.0',
          ],
      },
      classifiers=[
          'License :: OSI Approved :: BSD License',
          'Programming Language :: Python :: 3',
          'Topic :: Text Processing',
      ],
    )
