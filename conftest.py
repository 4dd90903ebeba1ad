import matplotlib

# Charts are only ever written to files in the tests
matplotlib.use("Agg")
