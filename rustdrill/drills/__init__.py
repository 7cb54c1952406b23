"""Python reference solutions for the exercises, grouped by topic."""