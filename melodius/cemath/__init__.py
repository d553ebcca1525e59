"""Scalar numerical routines: value checks, elementary and special functions."""