# -*- coding: utf-8 -*-
"""
Created on Wed Jan 14 08:51:06 2026

@author: bboyg
"""

from scenarios import reference_params, run_hemisphere_scan, scan_summary


def main():
    # =========================
    # Scan parameters
    # =========================
    params = reference_params()

    # =========================
    # Walk the scan
    # =========================
    df = run_hemisphere_scan(params, n_steps=100)

    # First row is the start position, the rest are the 100 advances
    for _, row in df.iloc[1:].iterrows():
        print(f"Horizontal: {int(row['h']):5}, Vertical: {int(row['v']):5}")

    df.to_csv("scan_output.csv", index=False)

    summary = scan_summary(df)
    print("Saved scan_output.csv")
    print("Unique positions:", summary["unique_positions"], "rings:", summary["rings"])
    print("Largest jump (steps):", round(summary["max_jump_steps"], 1))


if __name__ == "__main__":
    main()
