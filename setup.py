from setuptools import setup, find_packages

setup(
    name='graph-console',
    version='1.0.0',
    description='Interactive console editor for a directed, weighted graph',
    packages=find_packages(include=['graph_api', 'graph_api.*', 'graph_console', 'graph_console.*']),
    install_requires=[
        'rich',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'graph-console = graph_console.__main__:main',
        ],
    },
    python_requires='>=3.8',
)
