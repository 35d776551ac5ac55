from setuptools import find_packages, setup

package_name = 'survey_planner'

setup(
    name='survey-planner',
    version='0.1.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    data_files=[
        ('share/' + package_name + '/config', ['config/double_grid.example.yaml']),
    ],
    python_requires='>=3.9',
    install_requires=['setuptools', 'PyYAML'],
    extras_require={'test': ['pytest']},
    zip_safe=True,
    description='Serpentine double-grid flight path planner for aerial survey missions.',
    license='Apache-2.0',
    tests_require=['pytest'],
    entry_points={
        'console_scripts': [
            'survey-planner = survey_planner.cli:main',
        ],
    },
)
