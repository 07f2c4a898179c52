from setuptools import setup, find_packages


setup(
    name="sunhex",
    version="0.1",
    packages=find_packages(include=["sunhex", "sunhex.*"]),
    description="Password-protected, offline-decodable personal-data fragments.",
    python_requires=">=3.8",
    install_requires=[
        "pycryptodomex>=3.23.0",
        "httpx>=0.27.0",
        "python-dotenv>=1.0.0",
    ],
    entry_points={
        "console_scripts": [
            "sunhex=sunhex.cli:main",
        ]
    },
)
