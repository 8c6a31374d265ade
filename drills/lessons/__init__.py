"""Reference solutions for the exercises, grouped by topic."""