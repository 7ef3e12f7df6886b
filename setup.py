from setuptools import setup, find_packages

setup(
    name='nestpath',
    version='0.1.0',
    author='Thomas Hansen',
    author_email='thomas.hansen@queensu.ca',
    description='Dot-path helpers for nested dicts and lists, with a CLI for JSON, YAML and CSV documents.',
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    install_requires=[
        'pandas',
        'pydantic>=2',
        'pyyaml',
        'click',
        'platformdirs',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        "console_scripts": [
            # 'nestpath' command will call the main() group in nestpath/cli.py
            "nestpath = nestpath.cli:main",
        ],
    },
    classifiers=[
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.10',
)
