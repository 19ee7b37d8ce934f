"""Setup script for funtype."""
import runpy

from setuptools import setup, find_packages  # type: ignore

# funtype/__init__.py imports the runtime dependencies, so read the version
# without importing the package.
version = runpy.run_path('funtype/_version.py')['version']

setup(
    name='funtype',
    version=version,
    description='Curried function types and their application to argument types',  # noqa
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    license='MIT',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Compilers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3.12',
    ],
    keywords='types unification currying',
    packages=find_packages(include=['funtype', 'funtype.*']),  # type: ignore
    python_requires='>=3.12',
    install_requires=[
        'parsy>=2.0,<3',
        'typing-extensions>=4.10',
    ],
    entry_points={
        'console_scripts': ['funtype = funtype.__main__:main'],
    },
    extras_require={
        'test': [
            'coverage>=7',
            'hypothesis>=6',
            'pytest>=7',
        ],
        'dev': ['axblack==20220330', 'mypy>=1.1.1', 'pre-commit>=2.6.0,<3'],
    },
)
