from setuptools import setup

setup(name="urlargs",
  version="0.1",
  description="HTTP request arguments with charset-aware percent encoding.",
  license="MIT",
  package_dir={'urlargs': 'src'},
  packages=['urlargs'],
  install_requires=["requests"],
  extras_require={"test": ["pytest"]},
  python_requires="~=3.9",
  entry_points="""
    [console_scripts]
    urlargs=urlargs.cli:cli
  """)
