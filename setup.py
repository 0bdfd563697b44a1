"""Setup script for minforth."""
from setuptools import setup, find_packages  # type: ignore
import minforth

setup(
    name='minforth',
    version=minforth.version,
    description='A small Forth-like stack language interpreter',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    license='MIT',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Interpreters',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
    keywords='forth concatenative stack',
    packages=find_packages(include=['minforth', 'minforth.*']),  # type: ignore
    python_requires='>=3.11',
    install_requires=[
        'parsy>=2,<3',
        'typing-extensions>=4.1',
    ],
    extras_require={
        'test': ['coverage>=7', 'hypothesis>=6', 'pytest>=7'],
        'dev': ['mypy>=1.1.1', 'pre-commit>=2.6.0'],
    },
)
