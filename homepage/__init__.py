"""Static builder for Joel Hanson's personal homepage."""
