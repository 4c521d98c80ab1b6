from typing import Tuple

import streamlit as st

from property_price.config import DEFAULT_AREA
from property_price.data.training_data import AREA_MULTIPLIERS
from property_price.features.build_features import build_feature_vector
from property_price.formatting import format_inr, format_lakhs
from property_price.models.lifecycle import EstimatorLifecycle, initialize
from property_price.models.predict import Estimator

st.set_page_config(page_title="Property Price Predictor", page_icon="🏠")
st.title("Property Price Predictor")
st.caption("Estimate property values in Indian market")


@st.cache_resource
def start_training() -> EstimatorLifecycle:
    return initialize(verbose=True)


def read_form() -> Tuple[str, Tuple[float, ...]]:
    areas = list(AREA_MULTIPLIERS.keys())
    col1, col2 = st.columns(2)
    with col1:
        area = st.selectbox("Area", areas, index=areas.index(DEFAULT_AREA), key="area")
    with col2:
        square_footage = st.number_input("Square Footage", value=2000.0, step=50.0, key="square_footage")

    col1, col2, col3 = st.columns(3)
    with col1:
        bedrooms = st.number_input("Bedrooms", value=3, step=1, key="bedrooms")
    with col2:
        bathrooms = st.number_input("Bathrooms", value=2, step=1, key="bathrooms")
    with col3:
        garage = st.number_input("Garage Spaces", value=2, step=1, key="garage")

    return area, build_feature_vector(square_footage, bedrooms, bathrooms, garage, area)


def render_prediction(estimator: Estimator, area: str, features: Tuple[float, ...]) -> None:
    try:
        price = estimator.predict(features)
    except Exception as e:
        st.error(f"Prediction failed: {e}")
        return

    # NaN and zero estimates are not shown
    if not price or price != price:
        return

    st.markdown("---")
    st.subheader("Estimated Property Value")
    st.markdown(f"<h1 style='margin:0'>{format_inr(price)}</h1>", unsafe_allow_html=True)
    st.markdown(f"### {format_lakhs(price)}")
    st.caption(f"This is an estimate based on the provided features and training data for {area}")


lifecycle = start_training()
area, features = read_form()

if not lifecycle.ready:
    try:
        with st.spinner("Training model, please wait..."):
            lifecycle.wait()
    except Exception as e:
        st.error(f"Model training failed: {e}")
        st.stop()

render_prediction(lifecycle.estimator, area, features)
