"""
Plot the text 'bspline': cubic B-spline in 2D for the position of the curve
and quadratic B-spline in RGB space to color it.
"""
import os
import logging

from genspline import config
from genspline import spline_plot as sp

script_dir = os.path.dirname(os.path.realpath(__file__))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    splines = config.load_splines(os.path.join(script_dir, "logo.yaml"))
    position, color = splines['position'], splines['color']
    logging.info(f"Plotting logo on t range: {position.knot_domain()}")

    plotting = sp.Plotting(sp.PlottingMatplot())
    plotting.plot_colored_curve_2d(position, color, n_points=28000)
    plotting.plot_curve_poles_2d(position)
    fname = plotting.show("logo.png")
    logging.info(f"B-spline logo saved to {fname}")
