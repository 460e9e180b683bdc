# -*- coding: utf-8 -*-
"""
Created on Wed Jan 14 12:52:22 2026

@author: bboyg
"""

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation
from matplotlib.widgets import Slider, Button
from matplotlib.patches import Ellipse


def load_output(csv_path="scan_output.csv"):
    df = pd.read_csv(csv_path)
    return df


def plot_scan_path(df):
    """Plot the visited scan positions, azimuth vs elevation (degrees)."""
    az = np.degrees(df["az_rad"].to_numpy())
    el = np.degrees(df["el_rad"].to_numpy())

    plt.figure()
    plt.plot(az, el, "-", alpha=0.4)
    plt.scatter(az, el, c=df["step"].to_numpy(), s=20)
    plt.plot(az[0], el[0], "ro", label="Start")
    plt.xlabel("Azimuth (deg)")
    plt.ylabel("Elevation (deg)")
    plt.title("Hemisphere Scan Path")
    plt.grid(True)
    plt.legend()
    plt.show()


def plot_ring_counts(df):
    """Bar chart of distinct positions per elevation ring."""
    unique = df[["h", "v", "ring"]].drop_duplicates()
    counts = unique.groupby("ring")["h"].count()

    plt.figure()
    plt.bar(counts.index.to_numpy(), counts.to_numpy())
    plt.xlabel("Ring (0 = horizon)")
    plt.ylabel("Positions")
    plt.title("Azimuth Samples per Ring")
    plt.grid(True, axis="y")
    plt.show()


def animate_scan(df, fov_h_deg=34.16, fov_v_deg=25.72, interval_ms=200):
    """
    Steps the camera footprint along the scan path with slider + pause.
    Uses:
      step, az_rad, el_rad, jump_steps
    """
    az = np.degrees(df["az_rad"].to_numpy())
    el = np.degrees(df["el_rad"].to_numpy())
    jump = df["jump_steps"].to_numpy()
    frames = np.arange(len(df))
    if len(frames) == 0:
        print("No scan positions to animate.")
        return

    fig = plt.figure(figsize=(10, 5))
    ax = fig.add_subplot(111)

    ax.set_xlabel("Azimuth (deg)")
    ax.set_ylabel("Elevation (deg)")
    ax.set_title("Camera Footprint along Scan")
    ax.grid(True)

    ax.set_xlim(-180 - fov_h_deg, 180 + fov_h_deg)
    ax.set_ylim(np.nanmin(el) - fov_v_deg, np.nanmax(el) + fov_v_deg)

    ax.plot(az, el, ".", color="gray", alpha=0.5, label="Scan positions")
    center_dot, = ax.plot([], [], "ro", label="Camera")

    footprint = Ellipse((0, 0), width=fov_h_deg, height=fov_v_deg, alpha=0.3)
    ax.add_patch(footprint)

    step_text = ax.text(0.02, 0.95, "", transform=ax.transAxes,
                        va="top", bbox=dict(facecolor="white", alpha=0.6))
    jump_text = ax.text(0.02, 0.85, "", transform=ax.transAxes,
                        va="top", bbox=dict(facecolor="white", alpha=0.6))

    ax.legend()
    plt.subplots_adjust(bottom=0.25)

    ax_slider = plt.axes([0.2, 0.12, 0.6, 0.03])
    slider = Slider(ax_slider, "Step", valmin=0, valmax=int(frames[-1]),
                    valinit=0, valstep=1)

    ax_button = plt.axes([0.42, 0.03, 0.16, 0.06])
    btn = Button(ax_button, "Pause")

    state = {"paused": False}

    def update(i):
        i = int(i)
        center_dot.set_data([az[i]], [el[i]])
        footprint.center = (az[i], el[i])

        step_text.set_text(f"Step: {i}")
        jump_text.set_text(f"Jump: {jump[i]:.1f} steps")
        return center_dot, footprint, step_text, jump_text

    ani = FuncAnimation(fig, update, frames=frames, interval=interval_ms, blit=False)

    def on_slider(val):
        update(int(slider.val))
        fig.canvas.draw_idle()

    slider.on_changed(on_slider)

    def toggle(event):
        if state["paused"]:
            ani.event_source.start()
            btn.label.set_text("Pause")
        else:
            ani.event_source.stop()
            btn.label.set_text("Play")
        state["paused"] = not state["paused"]

    btn.on_clicked(toggle)
    plt.show()


if __name__ == "__main__":
    df = load_output("scan_output.csv")
    plot_scan_path(df)
    plot_ring_counts(df)
    animate_scan(df)
