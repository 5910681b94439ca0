from setuptools import setup, find_packages

setup(
   name="docgateway",
   version="0.1.0",
   package_dir={"": "src"},
   packages=find_packages(where="src"),
   include_package_data=True,
   python_requires=">=3.10",
   install_requires=[
       "motor>=3.3",
       "pymongo>=4.5",
       "pydantic>=2.0",
       "fastapi>=0.100",
   ],
   extras_require={
       "test": [
           "pytest>=7.0",
           "pytest-asyncio>=0.21",
           "httpx>=0.24",
       ],
   },
)
