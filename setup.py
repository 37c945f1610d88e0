# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="treedocs",
    version="0.1.0",
    description="Genera páginas índice y barras laterales con estadísticas para colecciones de documentos",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["treedocs*"]),
    package_data={
        "treedocs.interface.locales": ["*.json"],
    },
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'treedocs=treedocs.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
