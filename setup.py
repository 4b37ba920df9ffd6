from setuptools import setup

setup(
    name='seattlerain',
    version='0.1.0',
    packages=['seattlerain'],
    license='MIT',
    description='synthetic daily rainfall for Seattle with monthly totals and summary statistics',
    python_requires='>=3.9',
    install_requires=["pandas", "numpy", "toml"],
    extras_require={"test": ["pytest"]}
)
