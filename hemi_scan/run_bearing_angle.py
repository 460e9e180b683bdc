# -*- coding: utf-8 -*-
"""
Created on Tue Feb 03 09:05:44 2026

@author: bboyg
"""

from geo_bearing import GeoCoordinate, bearing_angle
from utils_frames import rad2deg


def main():
    camera = GeoCoordinate(37.7621, -122.4111)
    obj = GeoCoordinate(37.795921, -122.466652)

    angle_rad = bearing_angle(camera, obj)
    print("Angle:", rad2deg(angle_rad))


if __name__ == "__main__":
    main()
