from setuptools import setup, find_packages

with open('requirements.txt') as f:
    required = f.read().splitlines()

setup(
    name = 'fee-ledger',
    version = '0.1.0',
    description = 'Fee-bearing value ledger with redemption routing',
    packages = find_packages(include=['feeledger', 'feeledger.*']),
    install_requires = required,
    extras_require = {
        'test': ['pytest', 'pytest-cov']
    }
)
