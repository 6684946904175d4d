from setuptools import setup, find_namespace_packages
import re
from pathlib import Path

_version_re = re.compile(r"^__version__\s*(?::\s*\w+\[?\w*\]?)?\s*=\s*['\"]([^'\"]+)['\"]", re.M)


def file_getVersion(rel_path: str) -> str:
    """
    Retrieve the version string from the specified file.
    """
    version_file = Path(rel_path)
    if not version_file.exists():
        raise RuntimeError(f"Version file {rel_path} not found.")

    with open(version_file, 'r') as f:
        content = f.read()
        match = _version_re.search(content)
        if not match:
            raise RuntimeError(f"Could not find __version__ in {rel_path}")
        return match.group(1)


setup(
    name='sqlescape',
    version=file_getVersion('sqlescape/escsql.py'),
    description='Rewriter for {keyword args} escape clauses in SQL text',
    author='FNNDSC',
    author_email='rudolph.pienaar@childrens.harvard.edu',
    url='https://github.com/FNNDSC/sqlescape',
    packages=find_namespace_packages(include=['sqlescape', 'sqlescape.*']),
    python_requires='>=3.11',
    install_requires=[
        'appdirs',
        'click',
        'loguru',
        'pydantic>=2',
        'pydantic-settings>=2',
        'rich',
    ],
    license='MIT',
    entry_points={
        'console_scripts': [
            'escsql = sqlescape.escsql:main'
        ]
    },
    classifiers=[
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Database',
        'Topic :: Text Processing',
    ],
    extras_require={
        'none': [],
        'dev': [
            'pytest>=7.1'
        ]
    }
)
