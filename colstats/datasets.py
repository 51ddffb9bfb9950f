"""
Reference datasets for examples and validation.

sat / gpa: ten students' SAT scores and college GPAs, paired by index.
data1: a short single-column sample.

Known values (population statistics, 4 decimal places):
    mean(gpa) = 2.8070        stddev(gpa) = 0.2295
    mean(sat) = 1742.1        stddev(sat) = 52.9367
    regression of gpa on sat: slope = 0.0025, intercept = -1.5909
    correlation(gpa, sat) = 0.5823
"""

import numpy as np

sat = np.array([1714.0, 1664.0, 1760.0, 1685.0, 1693.0, 1764.0, 1764.0, 1792.0, 1850.0, 1735.0])
sat.flags.writeable = False

gpa = np.array([2.4, 2.52, 2.54, 2.74, 2.83, 3.0, 3.0, 3.01, 3.01, 3.02])
gpa.flags.writeable = False

data1 = np.array([10.0, 11.0, 12.0, 14.0, 9.0])
data1.flags.writeable = False

# Column order of the sat-gpa CSV layout: gpa in column 0, sat in column 1
SAT_GPA_HEADER = "gpa,sat"


def sat_gpa_rows() -> list[str]:
    """The sat/gpa pairs as CSV lines (header first)."""
    rows = [SAT_GPA_HEADER]
    rows.extend(f"{g:g},{s:g}" for g, s in zip(gpa, sat))
    return rows
