from setuptools import setup, find_packages

setup(
    name="kiosk",
    version="0.1",
    packages=find_packages(include=["kiosk", "kiosk.*"]),
    python_requires=">=3.9",
    install_requires=[
        'opencv-python-headless',
        'pillow',
        'numpy',
        'rich',
        'click',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-asyncio',
        ],
    },
    entry_points={
        'console_scripts': [
            'kiosk=kiosk.cli:main',
        ],
    },
)
