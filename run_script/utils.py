import os
import inspect
from typing import Optional


def prepare_results_directory(results_root: Optional[str]=None) -> str:
    """
    Create results/<grandparent>/<parent>/<NNN> for the calling script, NNN being the next free run number.
    :param results_root: folder holding the results, <project root>/results if None
    :return: path of the new run directory
    """
    caller_file = os.path.abspath(inspect.stack()[1].filename)
    file_dir = os.path.dirname(caller_file)
    parent_name = os.path.basename(file_dir)
    grandparent_name = os.path.basename(os.path.dirname(file_dir))

    if results_root is None:
        project_root = os.path.abspath(os.path.join(file_dir, '..', '..', '..'))
        results_root = os.path.join(project_root, 'results')
    results_parent = os.path.join(results_root, grandparent_name, parent_name)
    os.makedirs(results_parent, exist_ok=True)

    run_numbers = [int(d) for d in os.listdir(results_parent)
                   if d.isdigit() and os.path.isdir(os.path.join(results_parent, d))]
    run_dir = os.path.join(results_parent, f"{max(run_numbers, default=0) + 1:03d}")
    os.makedirs(run_dir, exist_ok=True)
    return run_dir
