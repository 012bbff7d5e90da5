# -*- coding: utf-8 -*-
from setuptools import setup

packages = ['pdsim', 'pdsim.game']

package_data = {'': ['*']}

install_requires = ['matplotlib', 'numpy', 'pandas']

extras_require = {'test': ['pytest']}

setup_kwargs = {
    'name': 'pdsim',
    'version': '0.1.0',
    'description': "Repeated Prisoner's Dilemma simulation library.",
    'long_description': None,
    'author': 'Jeremy Silver',
    'author_email': 'jeremys@nessiness.com',
    'maintainer': None,
    'maintainer_email': None,
    'url': None,
    'packages': packages,
    'package_data': package_data,
    'install_requires': install_requires,
    'extras_require': extras_require,
    'scripts': ['bin/pd_match.py'],
    'python_requires': '>=3.7,<4.0',
}


setup(**setup_kwargs)
