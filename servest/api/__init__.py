"""HTTP surface for the servest estimation pipeline."""
