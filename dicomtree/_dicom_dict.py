"""DICOM data dictionary auto-generated by generate_dicom_dict.py"""

# Each dict entry is Tag: (VR, VM, Name, Retired, Keyword)
DicomDictionary = {
    '0002,0000': ('UL', '1', "File Meta Information Group Length", '', 'FileMetaInformationGroupLength'),  # noqa
    '0002,0001': ('OB', '1', "File Meta Information Version", '', 'FileMetaInformationVersion'),  # noqa
    '0002,0002': ('UI', '1', "Media Storage SOP Class UID", '', 'MediaStorageSOPClassUID'),  # noqa
    '0002,0003': ('UI', '1', "Media Storage SOP Instance UID", '', 'MediaStorageSOPInstanceUID'),  # noqa
    '0002,0010': ('UI', '1', "Transfer Syntax UID", '', 'TransferSyntaxUID'),  # noqa
    '0002,0012': ('UI', '1', "Implementation Class UID", '', 'ImplementationClassUID'),  # noqa
    '0002,0013': ('SH', '1', "Implementation Version Name", '', 'ImplementationVersionName'),  # noqa
    '0002,0016': ('AE', '1', "Source Application Entity Title", '', 'SourceApplicationEntityTitle'),  # noqa
    '0002,0100': ('UI', '1', "Private Information Creator UID", '', 'PrivateInformationCreatorUID'),  # noqa
    '0002,0102': ('OB', '1', "Private Information", '', 'PrivateInformation'),  # noqa
    '0008,0005': ('CS', '1-n', "Specific Character Set", '', 'SpecificCharacterSet'),  # noqa
    '0008,0008': ('CS', '2-n', "Image Type", '', 'ImageType'),  # noqa
    '0008,0012': ('DA', '1', "Instance Creation Date", '', 'InstanceCreationDate'),  # noqa
    '0008,0013': ('TM', '1', "Instance Creation Time", '', 'InstanceCreationTime'),  # noqa
    '0008,0016': ('UI', '1', "SOP Class UID", '', 'SOPClassUID'),  # noqa
    '0008,0018': ('UI', '1', "SOP Instance UID", '', 'SOPInstanceUID'),  # noqa
    '0008,0020': ('DA', '1', "Study Date", '', 'StudyDate'),  # noqa
    '0008,0021': ('DA', '1', "Series Date", '', 'SeriesDate'),  # noqa
    '0008,0022': ('DA', '1', "Acquisition Date", '', 'AcquisitionDate'),  # noqa
    '0008,0023': ('DA', '1', "Content Date", '', 'ContentDate'),  # noqa
    '0008,0030': ('TM', '1', "Study Time", '', 'StudyTime'),  # noqa
    '0008,0031': ('TM', '1', "Series Time", '', 'SeriesTime'),  # noqa
    '0008,0032': ('TM', '1', "Acquisition Time", '', 'AcquisitionTime'),  # noqa
    '0008,0033': ('TM', '1', "Content Time", '', 'ContentTime'),  # noqa
    '0008,0050': ('SH', '1', "Accession Number", '', 'AccessionNumber'),  # noqa
    '0008,0060': ('CS', '1', "Modality", '', 'Modality'),  # noqa
    '0008,0064': ('CS', '1', "Conversion Type", '', 'ConversionType'),  # noqa
    '0008,0070': ('LO', '1', "Manufacturer", '', 'Manufacturer'),  # noqa
    '0008,0080': ('LO', '1', "Institution Name", '', 'InstitutionName'),  # noqa
    '0008,0090': ('PN', '1', "Referring Physician's Name", '', 'ReferringPhysicianName'),  # noqa
    '0008,0100': ('SH', '1', "Code Value", '', 'CodeValue'),  # noqa
    '0008,0102': ('SH', '1', "Coding Scheme Designator", '', 'CodingSchemeDesignator'),  # noqa
    '0008,0104': ('LO', '1', "Code Meaning", '', 'CodeMeaning'),  # noqa
    '0008,1010': ('SH', '1', "Station Name", '', 'StationName'),  # noqa
    '0008,1030': ('LO', '1', "Study Description", '', 'StudyDescription'),  # noqa
    '0008,1032': ('SQ', '1', "Procedure Code Sequence", '', 'ProcedureCodeSequence'),  # noqa
    '0008,103E': ('LO', '1', "Series Description", '', 'SeriesDescription'),  # noqa
    '0008,1090': ('LO', '1', "Manufacturer's Model Name", '', 'ManufacturerModelName'),  # noqa
    '0008,1110': ('SQ', '1', "Referenced Study Sequence", '', 'ReferencedStudySequence'),  # noqa
    '0008,1111': ('SQ', '1', "Referenced Performed Procedure Step Sequence", '', 'ReferencedPerformedProcedureStepSequence'),  # noqa
    '0008,1140': ('SQ', '1', "Referenced Image Sequence", '', 'ReferencedImageSequence'),  # noqa
    '0008,1150': ('UI', '1', "Referenced SOP Class UID", '', 'ReferencedSOPClassUID'),  # noqa
    '0008,1155': ('UI', '1', "Referenced SOP Instance UID", '', 'ReferencedSOPInstanceUID'),  # noqa
    '0008,2112': ('SQ', '1', "Source Image Sequence", '', 'SourceImageSequence'),  # noqa
    '0010,0010': ('PN', '1', "Patient's Name", '', 'PatientName'),  # noqa
    '0010,0020': ('LO', '1', "Patient ID", '', 'PatientID'),  # noqa
    '0010,0030': ('DA', '1', "Patient's Birth Date", '', 'PatientBirthDate'),  # noqa
    '0010,0040': ('CS', '1', "Patient's Sex", '', 'PatientSex'),  # noqa
    '0010,1010': ('AS', '1', "Patient's Age", '', 'PatientAge'),  # noqa
    '0010,1020': ('DS', '1', "Patient's Size", '', 'PatientSize'),  # noqa
    '0010,1030': ('DS', '1', "Patient's Weight", '', 'PatientWeight'),  # noqa
    '0018,0015': ('CS', '1', "Body Part Examined", '', 'BodyPartExamined'),  # noqa
    '0018,0050': ('DS', '1', "Slice Thickness", '', 'SliceThickness'),  # noqa
    '0018,0060': ('DS', '1', "KVP", '', 'KVP'),  # noqa
    '0018,0080': ('DS', '1', "Repetition Time", '', 'RepetitionTime'),  # noqa
    '0018,0081': ('DS', '1', "Echo Time", '', 'EchoTime'),  # noqa
    '0018,0087': ('DS', '1', "Magnetic Field Strength", '', 'MagneticFieldStrength'),  # noqa
    '0018,0088': ('DS', '1', "Spacing Between Slices", '', 'SpacingBetweenSlices'),  # noqa
    '0018,1020': ('LO', '1-n', "Software Versions", '', 'SoftwareVersions'),  # noqa
    '0018,1030': ('LO', '1', "Protocol Name", '', 'ProtocolName'),  # noqa
    '0018,1150': ('IS', '1', "Exposure Time", '', 'ExposureTime'),  # noqa
    '0018,1151': ('IS', '1', "X-Ray Tube Current", '', 'XRayTubeCurrent'),  # noqa
    '0018,5100': ('CS', '1', "Patient Position", '', 'PatientPosition'),  # noqa
    '0020,000D': ('UI', '1', "Study Instance UID", '', 'StudyInstanceUID'),  # noqa
    '0020,000E': ('UI', '1', "Series Instance UID", '', 'SeriesInstanceUID'),  # noqa
    '0020,0010': ('SH', '1', "Study ID", '', 'StudyID'),  # noqa
    '0020,0011': ('IS', '1', "Series Number", '', 'SeriesNumber'),  # noqa
    '0020,0012': ('IS', '1', "Acquisition Number", '', 'AcquisitionNumber'),  # noqa
    '0020,0013': ('IS', '1', "Instance Number", '', 'InstanceNumber'),  # noqa
    '0020,0032': ('DS', '3', "Image Position (Patient)", '', 'ImagePositionPatient'),  # noqa
    '0020,0037': ('DS', '6', "Image Orientation (Patient)", '', 'ImageOrientationPatient'),  # noqa
    '0020,0052': ('UI', '1', "Frame of Reference UID", '', 'FrameOfReferenceUID'),  # noqa
    '0020,1041': ('DS', '1', "Slice Location", '', 'SliceLocation'),  # noqa
    '0028,0002': ('US', '1', "Samples per Pixel", '', 'SamplesPerPixel'),  # noqa
    '0028,0004': ('CS', '1', "Photometric Interpretation", '', 'PhotometricInterpretation'),  # noqa
    '0028,0006': ('US', '1', "Planar Configuration", '', 'PlanarConfiguration'),  # noqa
    '0028,0008': ('IS', '1', "Number of Frames", '', 'NumberOfFrames'),  # noqa
    '0028,0009': ('AT', '1-n', "Frame Increment Pointer", '', 'FrameIncrementPointer'),  # noqa
    '0028,0010': ('US', '1', "Rows", '', 'Rows'),  # noqa
    '0028,0011': ('US', '1', "Columns", '', 'Columns'),  # noqa
    '0028,0030': ('DS', '2', "Pixel Spacing", '', 'PixelSpacing'),  # noqa
    '0028,0100': ('US', '1', "Bits Allocated", '', 'BitsAllocated'),  # noqa
    '0028,0101': ('US', '1', "Bits Stored", '', 'BitsStored'),  # noqa
    '0028,0102': ('US', '1', "High Bit", '', 'HighBit'),  # noqa
    '0028,0103': ('US', '1', "Pixel Representation", '', 'PixelRepresentation'),  # noqa
    '0028,0106': ('US', '1', "Smallest Image Pixel Value", '', 'SmallestImagePixelValue'),  # noqa
    '0028,0107': ('US', '1', "Largest Image Pixel Value", '', 'LargestImagePixelValue'),  # noqa
    '0028,1050': ('DS', '1-n', "Window Center", '', 'WindowCenter'),  # noqa
    '0028,1051': ('DS', '1-n', "Window Width", '', 'WindowWidth'),  # noqa
    '0028,1052': ('DS', '1', "Rescale Intercept", '', 'RescaleIntercept'),  # noqa
    '0028,1053': ('DS', '1', "Rescale Slope", '', 'RescaleSlope'),  # noqa
    '0028,1054': ('LO', '1', "Rescale Type", '', 'RescaleType'),  # noqa
    '0028,3000': ('SQ', '1', "Modality LUT Sequence", '', 'ModalityLUTSequence'),  # noqa
    '0028,3010': ('SQ', '1', "VOI LUT Sequence", '', 'VOILUTSequence'),  # noqa
    '0032,1060': ('LO', '1', "Requested Procedure Description", '', 'RequestedProcedureDescription'),  # noqa
    '0040,0254': ('LO', '1', "Performed Procedure Step Description", '', 'PerformedProcedureStepDescription'),  # noqa
    '0040,0275': ('SQ', '1', "Request Attributes Sequence", '', 'RequestAttributesSequence'),  # noqa
    '0040,A730': ('SQ', '1', "Content Sequence", '', 'ContentSequence'),  # noqa
    '0054,0016': ('SQ', '1', "Radiopharmaceutical Information Sequence", '', 'RadiopharmaceuticalInformationSequence'),  # noqa
    '300A,00B0': ('SQ', '1', "Beam Sequence", '', 'BeamSequence'),  # noqa
    '300A,00B2': ('SH', '1', "Treatment Machine Name", '', 'TreatmentMachineName'),  # noqa
    '300A,00C0': ('IS', '1', "Beam Number", '', 'BeamNumber'),  # noqa
    '300A,00C2': ('LO', '1', "Beam Name", '', 'BeamName'),  # noqa
    '3006,0020': ('SQ', '1', "Structure Set ROI Sequence", '', 'StructureSetROISequence'),  # noqa
    '3006,0022': ('IS', '1', "ROI Number", '', 'ROINumber'),  # noqa
    '3006,0026': ('LO', '1', "ROI Name", '', 'ROIName'),  # noqa
    '7FE0,0008': ('OF', '1', "Float Pixel Data", '', 'FloatPixelData'),  # noqa
    '7FE0,0009': ('OD', '1', "Double Float Pixel Data", '', 'DoubleFloatPixelData'),  # noqa
    '7FE0,0010': ('OW', '1', "Pixel Data", '', 'PixelData'),  # noqa
    'FFFA,FFFA': ('SQ', '1', "Digital Signatures Sequence", '', 'DigitalSignaturesSequence'),  # noqa
    'FFFC,FFFC': ('OB', '1', "Data Set Trailing Padding", '', 'DataSetTrailingPadding'),  # noqa
    'FFFE,E000': ('NONE', '1', "Item", '', 'Item'),  # noqa
    'FFFE,E00D': ('NONE', '1', "Item Delimitation Item", '', 'ItemDelimitationItem'),  # noqa
    'FFFE,E0DD': ('NONE', '1', "Sequence Delimitation Item", '', 'SequenceDelimitationItem'),  # noqa
}

RepeatersDictionary = {
    '50xx,0005': ('US', '1', "Curve Dimensions", 'Retired', 'CurveDimensions'),  # noqa
    '50xx,3000': ('OW', '1', "Curve Data", 'Retired', 'CurveData'),  # noqa
    '60xx,0010': ('US', '1', "Overlay Rows", '', 'OverlayRows'),  # noqa
    '60xx,0011': ('US', '1', "Overlay Columns", '', 'OverlayColumns'),  # noqa
    '60xx,0040': ('CS', '1', "Overlay Type", '', 'OverlayType'),  # noqa
    '60xx,0050': ('SS', '2', "Overlay Origin", '', 'OverlayOrigin'),  # noqa
    '60xx,0100': ('US', '1', "Overlay Bits Allocated", '', 'OverlayBitsAllocated'),  # noqa
    '60xx,0102': ('US', '1', "Overlay Bit Position", '', 'OverlayBitPosition'),  # noqa
    '60xx,3000': ('OW', '1', "Overlay Data", '', 'OverlayData'),  # noqa
}
